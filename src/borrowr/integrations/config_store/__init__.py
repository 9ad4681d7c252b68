from borrowr.integrations.config_store.abc import ConfigStore
from borrowr.integrations.config_store.fake import FakeConfigStore
from borrowr.integrations.config_store.real import RealConfigStore

__all__ = ["ConfigStore", "FakeConfigStore", "RealConfigStore"]
