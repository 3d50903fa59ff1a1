"""Translation orchestration: translator registry and chain runner."""

from oamtranslate.core.errors import UnknownTranslatorError
from oamtranslate.core.injector import ServiceInjector
from oamtranslate.core.wrapper import KubeAppWrapper
from oamtranslate.pacts.types import TranslateContext, WorkloadIdentity

# Translator instances available to chains, keyed by name
_TRANSLATORS = {}
for _t in (ServiceInjector(), KubeAppWrapper()):
    _TRANSLATORS[_t.name] = _t

# Inject first so the Service is wrapped alongside the Deployment
DEFAULT_CHAIN = ("service-injector", "kube-app-wrapper")


def available_translators() -> list[str]:
    """Return registered translator names, sorted."""
    return sorted(_TRANSLATORS)


def get_translator(name: str):
    """Look up a registered translator by name."""
    try:
        return _TRANSLATORS[name]
    except KeyError:
        raise UnknownTranslatorError(name) from None


def resolve_chain(chain) -> list:
    """Resolve translator names (or translator objects) to instances, in order."""
    return [get_translator(t) if isinstance(t, str) else t for t in chain]


def translate(workload: WorkloadIdentity, children: list | None,
              ctx: TranslateContext | None = None,
              chain=DEFAULT_CHAIN) -> list | None:
    """Apply each translator in order, feeding each output into the next.

    Errors from any translator propagate unchanged; nothing is retried.
    """
    if ctx is None:
        ctx = TranslateContext()
    translators = resolve_chain(chain)
    result = children
    for translator in translators:
        result = translator.translate(workload, result, ctx)
    return result
