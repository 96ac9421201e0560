"""
Тесты управления: события pygame -> команды.
"""
import os
import sys

import pygame
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from controls import poll, translate
from game import Command


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestTranslate:
    @pytest.mark.parametrize("key,command", [
        (pygame.K_UP, Command.MOVE_UP),
        (pygame.K_DOWN, Command.MOVE_DOWN),
        (pygame.K_LEFT, Command.MOVE_LEFT),
        (pygame.K_RIGHT, Command.MOVE_RIGHT),
        (pygame.K_SPACE, Command.TOGGLE_PAUSE),
        (pygame.K_r, Command.RESTART),
        (pygame.K_ESCAPE, Command.QUIT),
    ])
    def test_keys(self, key, command):
        assert translate(key_down(key)) == command

    def test_window_close_quits(self):
        assert translate(pygame.event.Event(pygame.QUIT)) == Command.QUIT

    def test_unknown_key(self):
        assert translate(key_down(pygame.K_F1)) is None

    def test_key_up_ignored(self):
        assert translate(pygame.event.Event(pygame.KEYUP, key=pygame.K_UP)) is None


def test_poll_keeps_order_and_skips_noise():
    events = [
        key_down(pygame.K_UP),
        pygame.event.Event(pygame.KEYUP, key=pygame.K_UP),
        key_down(pygame.K_F1),
        key_down(pygame.K_LEFT),
        pygame.event.Event(pygame.QUIT),
    ]
    assert list(poll(events)) == [Command.MOVE_UP, Command.MOVE_LEFT, Command.QUIT]
