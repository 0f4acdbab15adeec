"""
Value types handed out by the infrastructure collaborators. The orchestrators only read them.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

SOURCE_NAT_SERVICE = "SourceNat"


@dataclass
class Zone:
    id: str
    name: str


@dataclass
class ServiceOffering:
    """
    :param cpu: Number of cores of an instance using this offering.
    :param ram: Memory of an instance using this offering in MB.
    """
    id: str
    name: str
    cpu: int
    ram: int


@dataclass
class Template:
    id: str
    name: str


class NetworkOfferingState(str, Enum):
    ENABLED = "Enabled"
    DISABLED = "Disabled"


@dataclass
class NetworkOffering:
    id: str
    name: str
    state: NetworkOfferingState = NetworkOfferingState.ENABLED
    services: List[str] = field(default_factory=list)
    egress_default_policy: bool = True
    tags: Optional[str] = None
    traffic_type: str = "Guest"

    @property
    def enabled(self):
        return self.state != NetworkOfferingState.DISABLED

    @property
    def supports_source_nat(self):
        return SOURCE_NAT_SERVICE in self.services


@dataclass
class PhysicalNetwork:
    id: str
    name: str
    zone_id: str
    tags: Optional[str] = None


@dataclass
class Network:
    id: str
    name: str
    zone_id: str
    account_id: str
    network_offering_id: Optional[str] = None


@dataclass
class Account:
    id: str
    name: str
    domain_id: str


@dataclass
class SshKeyPair:
    name: str
    account_id: str
    domain_id: str
    fingerprint: Optional[str] = None


class InstanceState(str, Enum):
    STARTING = "Starting"
    RUNNING = "Running"
    STOPPING = "Stopping"
    STOPPED = "Stopped"
    DESTROYED = "Destroyed"
    EXPUNGING = "Expunging"
    ERROR = "Error"


@dataclass
class Instance:
    id: str
    name: str
    state: InstanceState
    private_ip: Optional[str] = None

    @property
    def running(self):
        return self.state == InstanceState.RUNNING


@dataclass
class PublicIpAddress:
    id: str
    address: str
    network_id: str
