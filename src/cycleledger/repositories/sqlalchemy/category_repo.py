"""SQLAlchemy implementation of CategoryRepository."""

from typing import Optional

from sqlalchemy.orm import Session

from cycleledger.domain.models import Category
from cycleledger.repositories.sqlalchemy.orm_models import CategoryORM


class SqlAlchemyCategoryRepository:
    """SQLAlchemy-backed category repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, category: Category) -> Category:
        orm_category = CategoryORM(
            category_id=category.category_id,
            account_id=category.account_id,
            name=category.name,
            flow_type=category.flow_type,
            parent_id=category.parent_id,
        )
        self._db.add(orm_category)
        self._db.commit()
        self._db.refresh(orm_category)
        return self._to_domain(orm_category)

    def get_by_id(self, category_id: str) -> Optional[Category]:
        orm_category = self._db.query(CategoryORM).filter(
            CategoryORM.category_id == category_id
        ).first()
        return self._to_domain(orm_category) if orm_category else None

    def list_by_account(self, account_id: str) -> list[Category]:
        rows = (
            self._db.query(CategoryORM)
            .filter(CategoryORM.account_id == account_id)
            .order_by(CategoryORM.name)
            .all()
        )
        return [self._to_domain(r) for r in rows]

    @staticmethod
    def _to_domain(orm: CategoryORM) -> Category:
        return Category(
            category_id=orm.category_id,
            account_id=orm.account_id,
            name=orm.name,
            flow_type=orm.flow_type,
            parent_id=orm.parent_id,
        )
