from abc import ABC, abstractmethod


class EntityStore(ABC):
    """
    Persistent storage of entity records. Records are dataclass instances with an ``id`` attribute and are grouped by
    their type. Every method is atomic with respect to a single record.
    """

    @abstractmethod
    def create(self, record):
        """
        ;param record: A record whose id is not yet stored
        ;return record: The stored record
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, record_type, record_id):
        """
        ;return record: The stored record or ``None``
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, record_type, record_id, changes):
        """
        Atomically applies ``changes`` (a dict of attribute names to new values) to a stored record

        ;return record: The updated record
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, record_type, record_id):
        """
        ;return deleted: ``True`` if a record was removed
        """
        raise NotImplementedError

    @abstractmethod
    def list(self, record_type, **filters):
        """
        ;param filters: Attribute values a record must have to be listed
        ;return records: Matching records in insertion order
        """
        raise NotImplementedError
