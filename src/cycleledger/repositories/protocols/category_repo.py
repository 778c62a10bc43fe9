"""Category repository protocol."""

from typing import Protocol, Optional

from cycleledger.domain.models import Category


class CategoryRepository(Protocol):
    """Interface for category data access."""

    def create(self, category: Category) -> Category:
        """Persist a new category."""
        ...

    def get_by_id(self, category_id: str) -> Optional[Category]:
        """Retrieve category by ID."""
        ...

    def list_by_account(self, account_id: str) -> list[Category]:
        """List all categories of an account."""
        ...
