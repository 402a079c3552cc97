"""Property source loader package.

Exports the loader contract, the default `.properties`/`.xml` loader and
the extension registry.
"""

from src.libs.loader.base_loader import BasePropertySourceLoader
from src.libs.loader.errors import PropertiesFormatError
from src.libs.loader.loader_factory import PropertySourceLoaderFactory
from src.libs.loader.origin_tracked_properties import OriginTrackedPropertiesLoader
from src.libs.loader.properties_loader import PropertiesPropertySourceLoader

# 模块加载时注册默认扩展名。
for _extension in PropertiesPropertySourceLoader.FILE_EXTENSIONS:
    if _extension not in PropertySourceLoaderFactory._PROVIDERS:
        PropertySourceLoaderFactory.register_provider(_extension, PropertiesPropertySourceLoader)

__all__ = [
    "BasePropertySourceLoader",
    "OriginTrackedPropertiesLoader",
    "PropertiesFormatError",
    "PropertiesPropertySourceLoader",
    "PropertySourceLoaderFactory",
]
