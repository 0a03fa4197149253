"""Data models for Module Defense."""

from .connection import Connection
from .enemy import Enemy
from .game import Camera, Game
from .module import MODULE_KINDS, Module
from .projectile import Projectile

__all__ = [
    "MODULE_KINDS",
    "Module",
    "Connection",
    "Enemy",
    "Projectile",
    "Camera",
    "Game",
]
