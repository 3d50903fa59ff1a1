"""oamtranslate: translate rendered OAM workload children.

Re-exports the public API for translators and callers.
Callers can import directly from here or from oamtranslate.pacts.
"""

from oamtranslate.pacts.types import (
    WorkloadIdentity, TranslateContext,
    DeploymentChild, ServiceChild, OpaqueChild,
    ResourceTemplate, WrappedApplication,
)
from oamtranslate.pacts.helpers import classify_child, full_name, to_manifests
from oamtranslate.core.constants import DEFAULT_LABEL_KEY
from oamtranslate.core.errors import (
    TranslationError, SerializationError, StructuralViolationError,
    UnknownTranslatorError,
)
from oamtranslate.core.payload import serialize_child
from oamtranslate.core.wrapper import KubeAppWrapper, build_wrapped_application
from oamtranslate.core.injector import ServiceInjector, build_service, inject_service
from oamtranslate.core.translate import (
    DEFAULT_CHAIN, available_translators, get_translator, translate,
)

__all__ = [
    # Types
    "WorkloadIdentity",
    "TranslateContext",
    "DeploymentChild",
    "ServiceChild",
    "OpaqueChild",
    "ResourceTemplate",
    "WrappedApplication",
    # Errors
    "TranslationError",
    "SerializationError",
    "StructuralViolationError",
    "UnknownTranslatorError",
    # Translators
    "KubeAppWrapper",
    "ServiceInjector",
    "build_wrapped_application",
    "inject_service",
    "build_service",
    "translate",
    "get_translator",
    "available_translators",
    "DEFAULT_CHAIN",
    # Helpers
    "DEFAULT_LABEL_KEY",
    "classify_child",
    "full_name",
    "serialize_child",
    "to_manifests",
]
