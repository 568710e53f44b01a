from typing import List, Optional, Protocol, Sequence, Type, TypeVar

from symptomix.domain.models import StoredRecord


T = TypeVar("T", bound=StoredRecord)


class RecordStorePort(Protocol):
    def load_all(self, collection: str, model: Type[T]) -> List[T]:
        """
        Return every record in the collection; empty if it is missing or unreadable.
        """
        ...

    def save_all(self, collection: str, records: Sequence[StoredRecord]) -> None:
        ...

    def get_by_id(self, collection: str, record_id: str, model: Type[T]) -> Optional[T]:
        ...

    def add(self, collection: str, record: StoredRecord) -> str:
        """
        Store the record under a freshly generated id and return that id.
        Raises PersistenceWriteError rather than replacing an unreadable collection.
        """
        ...

    def update(self, collection: str, record_id: str, record: StoredRecord) -> bool:
        ...

    def delete(self, collection: str, record_id: str, model: Type[T]) -> bool:
        ...
