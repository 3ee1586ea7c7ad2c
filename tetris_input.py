
"""Keyboard -> session handler mapping"""
import pygame
from tetris_piece import CW, CCW

KEYMAP = {
    pygame.K_LEFT: lambda s: s.move_left(),
    pygame.K_RIGHT: lambda s: s.move_right(),
    pygame.K_DOWN: lambda s: s.soft_drop(),
    pygame.K_UP: lambda s: s.rotate(CW),
    pygame.K_z: lambda s: s.rotate(CCW),
    pygame.K_SPACE: lambda s: s.hard_drop(),
    pygame.K_p: lambda s: s.toggle_pause(),
    pygame.K_ESCAPE: lambda s: s.toggle_pause(),
    pygame.K_r: lambda s: s.restart(),
    pygame.K_m: lambda s: s.toggle_sound(),
}

def handle_key(session, key) -> bool:
    """Run the handler bound to ``key``; False if the key is unbound."""
    action = KEYMAP.get(key)
    if action is None: return False
    action(session)
    return True
