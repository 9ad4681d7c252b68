from borrowr.integrations.package_manager.abc import (
    PackageManager,
    detect_package_manager,
    install_command,
)
from borrowr.integrations.package_manager.fake import FakePackageManager
from borrowr.integrations.package_manager.real import RealPackageManager

__all__ = [
    "FakePackageManager",
    "PackageManager",
    "RealPackageManager",
    "detect_package_manager",
    "install_command",
]
