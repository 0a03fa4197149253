"""Helpers for building game states directly in tests."""

from module_defense.models import Connection, Game, Module


def add_module(
    game: Game, kind: str, x: float, y: float, droids: int = 0, level: int = 1
) -> Module:
    """Add a module directly, bypassing costs and placement rules.

    The ledger is credited with the module's droids so it stays balanced.
    """
    module = Module(id=game.next_id("module"), kind=kind, x=x, y=y, droids=droids, level=level)
    game.modules[module.id] = module
    game.total_droids += module.droids
    return module


def connect(game: Game, a: Module, b: Module) -> Connection:
    """Add a connection directly, free of charge."""
    connection = Connection(id=game.next_id("connection"), a=a.id, b=b.id)
    game.connections[connection.id] = connection
    return connection


def chain(game: Game, *modules: Module) -> None:
    """Connect modules in a line."""
    for a, b in zip(modules, modules[1:]):
        connect(game, a, b)
