from borrowr.integrations.transport.abc import RegistryTransport
from borrowr.integrations.transport.fake import FakeRegistryTransport
from borrowr.integrations.transport.real import RealRegistryTransport

__all__ = [
    "FakeRegistryTransport",
    "RealRegistryTransport",
    "RegistryTransport",
]
