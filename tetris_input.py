"""Key -> engine command mapping"""
from typing import Optional
import pygame
from tetris_engine import Command

KEYMAP = {
    pygame.K_a: Command.LEFT,  pygame.K_LEFT: Command.LEFT,
    pygame.K_d: Command.RIGHT, pygame.K_RIGHT: Command.RIGHT,
    pygame.K_s: Command.DOWN,  pygame.K_DOWN: Command.DOWN,
    pygame.K_w: Command.ROTATE, pygame.K_UP: Command.ROTATE,
}

def command_for_key(key) -> Optional[Command]:
    """Unmapped keys give None and are simply not posted."""
    return KEYMAP.get(key)
