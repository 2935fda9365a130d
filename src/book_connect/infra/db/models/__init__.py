from book_connect.infra.db.models.base import Base
from book_connect.infra.db.models.preference import PreferenceRow

__all__ = ["Base", "PreferenceRow"]
