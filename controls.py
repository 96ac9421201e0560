"""
Управление с клавиатуры: события pygame -> команды игры.
"""
import pygame

from game import Command


KEY_COMMANDS = {
    pygame.K_UP: Command.MOVE_UP,
    pygame.K_DOWN: Command.MOVE_DOWN,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_w: Command.MOVE_UP,
    pygame.K_s: Command.MOVE_DOWN,
    pygame.K_a: Command.MOVE_LEFT,
    pygame.K_d: Command.MOVE_RIGHT,
    pygame.K_SPACE: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESTART,
    pygame.K_RETURN: Command.RESTART,
    pygame.K_ESCAPE: Command.QUIT,
}


def translate(event):
    """Команда для одного события или None"""
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        return KEY_COMMANDS.get(event.key)
    return None


def poll(events=None):
    """Разобрать все накопившиеся события (не блокирует)"""
    if events is None:
        events = pygame.event.get()
    for event in events:
        command = translate(event)
        if command is not None:
            yield command
