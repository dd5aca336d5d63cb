"""
Configuration Schema and Models

Defines the Pydantic models that parameterize the messaging runtime: naming
conventions for files and directories, capacity limits, buffering policy and
behavioral switches. Every model is default-constructible with the shipped
defaults and is mutated in place through plain attribute assignment, which is
validated.

A Config instance is not internally synchronized. Mutate it from one thread
(typically at startup) and share it read-only afterwards, or guard the whole
instance with a lock.

Author: ipc-config Project
License: MIT
"""

import sys
from enum import Enum
from typing import Annotated, Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .duration import Duration
from .semantic_string import ValidatedFileName, ValidatedPath
from ..utils.logger import get_logger


logger = get_logger("config.schema")

USIZE_MAX = 2**64 - 1

UnsignedInt = Annotated[int, Field(strict=True, ge=0, le=USIZE_MAX)]
Switch = Annotated[bool, Field(strict=True)]

_MODEL_CONFIG = ConfigDict(
    validate_assignment=True,
    revalidate_instances="always",
    extra="forbid",
    populate_by_name=True,
)


def default_root_path() -> ValidatedPath:
    """Root directory used when none is configured, per platform."""
    if sys.platform == "win32":
        return ValidatedPath("c:\\Temp\\iceoryx2\\")
    return ValidatedPath("/tmp/iceoryx2/")


class UnableToDeliverStrategy(str, Enum):
    """Policy applied when a subscriber cannot accept a new sample."""
    BLOCK = "Block"
    DISCARD_SAMPLE = "DiscardSample"


class ServiceConfig(BaseModel):
    """Naming and timeout policy for services on the filesystem."""

    model_config = _MODEL_CONFIG

    directory: ValidatedPath = Field(
        default=ValidatedPath("services"),
        description="Service directory, relative to the root path"
    )
    publisher_data_segment_suffix: ValidatedFileName = Field(
        default=ValidatedFileName(".publisher_data"),
        description="Suffix of a publisher's data segment"
    )
    static_config_storage_suffix: ValidatedFileName = Field(
        default=ValidatedFileName(".service"),
        description="Suffix of a service's static configuration storage"
    )
    dynamic_config_storage_suffix: ValidatedFileName = Field(
        default=ValidatedFileName(".dynamic"),
        description="Suffix of a service's dynamic configuration storage"
    )
    creation_timeout: Duration = Field(
        default_factory=lambda: Duration.from_millis(500),
        description="How long an opener waits for a service that is still being created"
    )
    connection_suffix: ValidatedFileName = Field(
        default=ValidatedFileName(".connection"),
        description="Suffix of a publisher/subscriber connection"
    )
    event_connection_suffix: ValidatedFileName = Field(
        default=ValidatedFileName(".event"),
        description="Suffix of an event notifier/listener connection"
    )


class NodeConfig(BaseModel):
    """Naming and cleanup policy for node bookkeeping."""

    model_config = _MODEL_CONFIG

    directory: ValidatedPath = Field(
        default=ValidatedPath("nodes"),
        description="Node directory, relative to the root path"
    )
    monitor_suffix: ValidatedFileName = Field(
        default=ValidatedFileName(".node_monitor"),
        description="Suffix of the token used to monitor a node's liveness"
    )
    static_config_suffix: ValidatedFileName = Field(
        default=ValidatedFileName(".details"),
        description="Suffix of a node's static details"
    )
    service_tag_suffix: ValidatedFileName = Field(
        default=ValidatedFileName(".service_tag"),
        description="Suffix of the tag a node leaves for each service it uses"
    )
    cleanup_dead_nodes_on_creation: Switch = Field(
        default=True,
        description="Remove stale resources of dead nodes when a node is created"
    )
    cleanup_dead_nodes_on_destruction: Switch = Field(
        default=True,
        description="Remove stale resources of dead nodes when a node is dropped"
    )


class GlobalConfig(BaseModel):
    """Settings shared by every service and node of the runtime."""

    model_config = _MODEL_CONFIG

    prefix: ValidatedFileName = Field(
        default=ValidatedFileName("iox2_"),
        description="Prefix of every file the runtime creates"
    )
    root_path: ValidatedPath = Field(
        default_factory=default_root_path,
        description="Directory that contains all runtime files"
    )
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    node: NodeConfig = Field(default_factory=NodeConfig)

    def service_dir(self) -> ValidatedPath:
        """Absolute location of the service directory."""
        return self.root_path.join(self.service.directory)

    def node_dir(self) -> ValidatedPath:
        """Absolute location of the node directory."""
        return self.root_path.join(self.node.directory)


class EventDefaults(BaseModel):
    """Default limits of event services."""

    model_config = _MODEL_CONFIG

    max_listeners: UnsignedInt = Field(
        default=2,
        description="Maximum number of listener ports"
    )
    max_notifiers: UnsignedInt = Field(
        default=16,
        description="Maximum number of notifier ports"
    )
    max_nodes: UnsignedInt = Field(
        default=36,
        description="Maximum number of nodes that may open the service"
    )
    event_id_max_value: UnsignedInt = Field(
        default=4294967295,
        description="Largest event id a notifier may emit"
    )


class PublishSubscribeDefaults(BaseModel):
    """
    Default limits and delivery policy of publish-subscribe services.

    Capacity fields accept zero; enforcing a minimum is left to whoever
    builds services from these values.
    """

    model_config = _MODEL_CONFIG

    max_subscribers: UnsignedInt = Field(
        default=8,
        description="Maximum number of subscriber ports"
    )
    max_publishers: UnsignedInt = Field(
        default=2,
        description="Maximum number of publisher ports"
    )
    max_nodes: UnsignedInt = Field(
        default=20,
        description="Maximum number of nodes that may open the service"
    )
    subscriber_max_buffer_size: UnsignedInt = Field(
        default=2,
        description="Samples a subscriber can hold before it is full"
    )
    subscriber_max_borrowed_samples: UnsignedInt = Field(
        default=2,
        description="Samples a subscriber can borrow in parallel"
    )
    publisher_max_loaned_samples: UnsignedInt = Field(
        default=2,
        description="Samples a publisher can loan in parallel"
    )
    publisher_history_size: UnsignedInt = Field(
        default=0,
        description="Samples replayed to a subscriber when it connects"
    )
    enable_safe_overflow: Switch = Field(
        default=True,
        description="Recycle the oldest sample instead of failing when a subscriber buffer is full"
    )
    unable_to_deliver_strategy: UnableToDeliverStrategy = Field(
        default=UnableToDeliverStrategy.BLOCK,
        description="What a publisher does when a subscriber cannot receive"
    )
    subscriber_expired_connection_buffer: UnsignedInt = Field(
        default=128,
        description="Samples kept from connections whose publisher is gone"
    )


class Defaults(BaseModel):
    """Per-messaging-pattern defaults applied to newly created services."""

    model_config = _MODEL_CONFIG

    event: EventDefaults = Field(default_factory=EventDefaults)
    publish_subscribe: PublishSubscribeDefaults = Field(default_factory=PublishSubscribeDefaults)


class Config(BaseModel):
    """
    Root configuration model.

    Owns one GlobalConfig and one Defaults. ``global`` is a Python keyword, so
    the attribute is ``global_``; in mappings the key is ``global``.

    Example:
        config = Config()
        config.global_.prefix = ValidatedFileName.create("oh_my_dot")
        config.defaults.event.max_listeners = 123
    """

    model_config = _MODEL_CONFIG

    global_: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    defaults: Defaults = Field(default_factory=Defaults)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Config":
        """
        Build a validated configuration from nested plain data.

        Keys may be snake_case or kebab-case. Missing keys keep their shipped
        defaults; unknown keys are rejected.

        Args:
            data: Nested mapping keyed like the output of to_dict

        Returns:
            Validated Config object

        Raises:
            pydantic.ValidationError: If a value is invalid or a key is unknown
        """
        if isinstance(data, Mapping):
            data = normalize_keys(data)
            logger.debug(f"Building configuration from sections: {sorted(data, key=str)}")

        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the configuration to nested plain data.

        Validated strings become str, the delivery strategy becomes its token
        and durations become ``{"secs": ..., "nanos": ...}``.

        Returns:
            Dictionary keyed by the configuration vocabulary
        """
        return self.model_dump(mode="json", by_alias=True)


def normalize_keys(data: Any) -> Any:
    """
    Recursively rewrite kebab-case keys to snake_case.

    A legacy root_path_unix/root_path_windows pair is collapsed into
    root_path for the running platform unless root_path is already present.

    Example: {"publish-subscribe": {"max-nodes": 3}} -> {"publish_subscribe": {"max_nodes": 3}}

    Args:
        data: Any value (mapping, list or scalar)

    Returns:
        The value with normalized keys, as new dicts and lists
    """
    if isinstance(data, Mapping):
        result = {
            key.replace("-", "_") if isinstance(key, str) else key: normalize_keys(value)
            for key, value in data.items()
        }
        _migrate_root_path(result)
        return result
    if isinstance(data, list):
        return [normalize_keys(item) for item in data]
    return data


def _migrate_root_path(section: Dict[str, Any]) -> None:
    """
    Collapse the legacy root_path_unix/root_path_windows pair into root_path.

    The entry for the running platform wins unless root_path is already set.
    """
    unix = section.pop("root_path_unix", None)
    windows = section.pop("root_path_windows", None)
    if "root_path" in section:
        return
    chosen = windows if sys.platform == "win32" else unix
    if chosen is not None:
        logger.debug("Using legacy per-platform root path key")
        section["root_path"] = chosen
