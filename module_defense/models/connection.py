"""Connection data model for energy links between modules."""

from dataclasses import dataclass


@dataclass
class Connection:
    """An undirected link between two modules.

    Endpoints are module ids, so removing an unrelated module never changes
    a connection. ``a`` is the module that initiated the link.
    """

    id: int
    a: int  # Module id
    b: int  # Module id

    def __post_init__(self):
        """Validate connection data after initialization."""
        if self.a == self.b:
            raise ValueError(f"Connection cannot join module {self.a} to itself")

    @property
    def key(self) -> frozenset:
        """Unordered endpoint pair, used to reject duplicate connections."""
        return frozenset((self.a, self.b))

    def touches(self, module_id: int) -> bool:
        return module_id in (self.a, self.b)

    def other(self, module_id: int) -> int:
        """Return the endpoint opposite ``module_id``.

        Raises:
            ValueError: If ``module_id`` is not an endpoint
        """
        if module_id == self.a:
            return self.b
        if module_id == self.b:
            return self.a
        raise ValueError(f"Module {module_id} is not an endpoint of connection {self.id}")
