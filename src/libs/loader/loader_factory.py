"""PropertySourceLoader 工厂。

职责：
1) 维护扩展名注册表（扩展名 -> loader 类）。
2) 按资源文件名的扩展名选择并创建具体 loader 实例。
3) 在文件名缺失或扩展名不受支持时给出清晰的报错信息。
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Any

from src.core.resource import Resource
from src.core.settings import Settings
from src.core.types import MapPropertySource
from src.libs.loader.base_loader import BasePropertySourceLoader


def _normalize_extension(extension: str) -> str:
    return extension.strip().lstrip(".").lower()


class PropertySourceLoaderFactory:
    """基于注册表的 PropertySourceLoader 工厂。"""

    _PROVIDERS: dict[str, type[BasePropertySourceLoader]] = {}

    @classmethod
    def register_provider(
        cls,
        extension: str,
        provider_class: type[BasePropertySourceLoader],
    ) -> None:
        """注册 loader 实现类。

        参数说明：
        - extension: 文件扩展名（如 `properties`，前导 `.` 可有可无）。
        - provider_class: loader 类，必须继承 BasePropertySourceLoader。
        """

        normalized = _normalize_extension(extension)
        if not normalized:
            raise ValueError("Extension cannot be empty")

        if not isinstance(provider_class, type) or not issubclass(
            provider_class, BasePropertySourceLoader
        ):
            raise ValueError("Provider class must inherit from BasePropertySourceLoader")

        cls._PROVIDERS[normalized] = provider_class

    @classmethod
    def create(
        cls,
        resource: Resource,
        settings: Settings | None = None,
        **overrides: Any,
    ) -> BasePropertySourceLoader:
        """根据资源扩展名创建 loader 实例。

        参数说明：
        - resource: 待加载的资源，要求带有文件名。
        - settings: 全局配置对象（可选）。
        - **overrides: 单次覆盖构造参数（常用于测试或实验）。
        """

        # 步骤 1：从文件名中取扩展名。
        filename = resource.filename
        if not filename:
            raise ValueError(
                f"Cannot select a property source loader for {resource.description}: "
                "resource has no filename"
            )

        extension = _normalize_extension(PurePath(filename).suffix)

        # 步骤 2：查找注册表；若未注册则提示可用扩展名。
        provider_class = cls._PROVIDERS.get(extension) if extension else None
        if provider_class is None:
            available = cls.list_providers()
            available_text = ", ".join(available) if available else "none"
            raise ValueError(
                f"Unsupported property file extension: '{filename}'. "
                f"Available extensions: {available_text}"
            )

        # 步骤 3：实例化，包装底层初始化错误，便于上层定位。
        try:
            provider_constructor: Any = provider_class
            return provider_constructor(settings=settings, **overrides)
        except Exception as error:  # noqa: BLE001 - 统一包装底层初始化错误
            raise RuntimeError(
                f"Failed to instantiate property source loader for '.{extension}': {error}"
            ) from error

    @classmethod
    def load(
        cls,
        name: str,
        resource: Resource,
        settings: Settings | None = None,
    ) -> list[MapPropertySource]:
        """选择 loader 并立即加载资源。I/O 与格式错误原样向上抛出。"""

        return cls.create(resource, settings=settings).load(name, resource)

    @classmethod
    def list_providers(cls) -> list[str]:
        """返回已注册扩展名列表（字母序）。"""

        return sorted(cls._PROVIDERS.keys())
