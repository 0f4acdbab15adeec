from abc import ABC, abstractmethod
from enum import Enum


class AccessType(Enum):
    OPERATE = "operate"
    LIST = "list"


class AccessChecker(ABC):
    @abstractmethod
    def check_access(self, caller, entity, access_type):
        """
        ;param caller: The Account issuing the request
        ;param entity: The entity (e.g. a Cluster) the caller wants to access
        ;param access_type: An AccessType
        ;raises PermissionDenied: If the caller may not access the entity
        """
        raise NotImplementedError

    @abstractmethod
    def is_admin(self, caller):
        raise NotImplementedError
