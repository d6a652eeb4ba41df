"""
Service registry for the dashboard composition root.

Maps an interface type to exactly one way of producing it. Factories
receive the registry and may be plain functions or coroutines; resolve()
awaits whatever they return, so construction that needs network I/O (for
example fetching an access token) never blocks the event loop.

Lifetimes:
- singleton: created on first resolve, shared afterwards, closed by aclose()
  when the registry created it
- transient: created on every resolve, owned by the caller
"""
import asyncio
import inspect
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

Factory = Callable[["ServiceRegistry"], Union[Any, Awaitable[Any]]]


class RegistrationError(Exception):
    """Raised when an interface is registered twice or with bad arguments."""
    pass


class ServiceNotRegisteredError(LookupError):
    """Raised when resolving an interface nobody registered."""
    pass


class Lifetime(str, Enum):
    """How long a resolved instance lives."""
    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass
class ServiceDescriptor:
    """A single registration."""
    interface: type
    lifetime: Lifetime
    factory: Optional[Factory] = None
    instance: Any = None
    lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)


class ServiceRegistry:
    """Registration surface mapping interfaces to constructors."""

    def __init__(self) -> None:
        self._descriptors: Dict[type, ServiceDescriptor] = {}
        self._created: List[ServiceDescriptor] = []
        self._closed = False

    def _add(self, descriptor: ServiceDescriptor) -> None:
        name = descriptor.interface.__name__
        if descriptor.interface in self._descriptors:
            logger.error(f"ServiceRegistry: {name} is already registered")
            raise RegistrationError(f"{name} is already registered")
        self._descriptors[descriptor.interface] = descriptor
        logger.debug(f"ServiceRegistry: Registered {name} ({descriptor.lifetime.value})")

    def add_singleton(
        self,
        interface: type,
        factory: Optional[Factory] = None,
        instance: Any = None,
    ) -> None:
        """
        Register a shared instance.

        Exactly one of ``factory`` and ``instance`` must be given. Instances
        passed directly stay owned by the caller and are not closed by
        aclose().
        """
        if (factory is None) == (instance is None):
            raise RegistrationError("add_singleton needs exactly one of factory or instance")
        if factory is not None and not callable(factory):
            raise RegistrationError("factory must be callable")
        self._add(
            ServiceDescriptor(
                interface=interface,
                lifetime=Lifetime.SINGLETON,
                factory=factory,
                instance=instance,
            )
        )

    def add_transient(self, interface: type, factory: Factory) -> None:
        """Register a factory invoked on every resolve."""
        if not callable(factory):
            raise RegistrationError("factory must be callable")
        self._add(ServiceDescriptor(interface=interface, lifetime=Lifetime.TRANSIENT, factory=factory))

    def is_registered(self, interface: type) -> bool:
        return interface in self._descriptors

    def get_descriptor(self, interface: type) -> ServiceDescriptor:
        descriptor = self._descriptors.get(interface)
        if descriptor is None:
            raise ServiceNotRegisteredError(f"{interface.__name__} is not registered")
        return descriptor

    async def _invoke(self, descriptor: ServiceDescriptor) -> Any:
        result = descriptor.factory(self)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def resolve(self, interface: Type[T]) -> T:
        """
        Produce an instance of ``interface``.

        Raises:
            ServiceNotRegisteredError: If nothing is registered for it
            RuntimeError: If the registry has been closed
            Exception: Whatever the factory raises, unchanged
        """
        if self._closed:
            raise RuntimeError("ServiceRegistry has been closed")

        descriptor = self.get_descriptor(interface)
        if descriptor.lifetime is Lifetime.TRANSIENT:
            return await self._invoke(descriptor)

        if descriptor.instance is not None:
            return descriptor.instance

        async with descriptor.lock:
            if descriptor.instance is None:
                descriptor.instance = await self._invoke(descriptor)
                self._created.append(descriptor)
                logger.debug(f"ServiceRegistry: Created singleton {interface.__name__}")
        return descriptor.instance

    async def aclose(self) -> None:
        """
        Close singletons created by this registry, newest first.

        Every singleton is closed even when an earlier close fails; the
        first failure is re-raised afterwards.
        """
        first_error: Optional[Exception] = None
        try:
            for descriptor in reversed(self._created):
                name = descriptor.interface.__name__
                instance = descriptor.instance
                close = getattr(instance, "aclose", None) or getattr(instance, "close", None)
                if close is None:
                    continue
                try:
                    result = close()
                    if inspect.isawaitable(result):
                        await result
                except Exception as e:
                    logger.exception(f"ServiceRegistry.aclose: Closing {name} failed")
                    if first_error is None:
                        first_error = e
                    continue
                logger.debug(f"ServiceRegistry: Closed {name}")
        finally:
            self._created.clear()
            self._closed = True

        if first_error is not None:
            raise first_error
