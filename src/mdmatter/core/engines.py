"""Engine registry: built-in YAML/JSON/expression engines and name resolution"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

import yaml

from mdmatter.errors import MetadataSyntaxError, UnregisteredEngineError, UnsupportedOperationError
from mdmatter.util.logging import get_logger


logger = get_logger(__name__)

ALIASES = {
    'js':         'javascript',
    'javascript': 'javascript',
    'yaml':       'yaml',
    'yml':        'yaml',
}


@dataclass(frozen=True)
class Engine:
    """A parse/stringify capability pair for one front matter language.

    An engine built from a bare parse function has `stringify=None`
    (parse-only); stringifying through it is unsupported.
    """
    parse:     Callable[[str], Any]
    stringify: Optional[Callable[[Mapping[str, Any]], str]] = None

    @property
    def parse_only(self) -> bool:
        return self.stringify is None


def _yaml_parse(text: str) -> Any:
    try:
        return yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise MetadataSyntaxError(f"Invalid YAML front matter: {e}", language='yaml') from e


def _yaml_stringify(data: Mapping[str, Any]) -> str:
    return yaml.safe_dump(dict(data), default_flow_style=False, allow_unicode=True, sort_keys=False)


def _json_parse(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise MetadataSyntaxError(f"Invalid JSON front matter: {e}", language='json') from e


def _json_stringify(data: Mapping[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


# Names visible to evaluated blocks; no builtins are exposed.
_LITERALS = {'true': True, 'false': False, 'null': None, 'undefined': None}


def _namespace() -> dict[str, Any]:
    return {'__builtins__': {}, **_LITERALS}


def _expression_parse(text: str) -> Any:
    """Evaluate the block as an expression, falling back to statements.

    Statement blocks (`title = "Home"`) yield the public names they bind.
    Runs arbitrary code: only reachable with `unsafe_eval=True`.
    """
    source = text.strip()
    try:
        code = compile(source, '<front-matter>', 'eval')
    except SyntaxError:
        return _statements_parse(source)
    try:
        return eval(code, _namespace()) or {}
    except Exception as e:
        raise MetadataSyntaxError(f"Invalid javascript front matter: {e}", language='javascript') from e


def _statements_parse(source: str) -> dict[str, Any]:
    namespace = _namespace()
    try:
        exec(compile(source, '<front-matter>', 'exec'), namespace)
    except Exception as e:
        raise MetadataSyntaxError(f"Invalid javascript front matter: {e}", language='javascript') from e
    return {
        k: v for k, v in namespace.items()
        if not k.startswith('_') and k not in _LITERALS
    }


def _expression_disabled(text: str) -> Any:
    raise UnsupportedOperationError(
        'the javascript engine evaluates front matter as code; pass unsafe_eval=True to enable it',
        language='javascript',
    )


def builtin_engines(unsafe_eval: bool = False) -> dict[str, Engine]:
    """Return fresh built-in engines; the expression engine is gated by unsafe_eval."""
    return {
        'yaml':       Engine(parse=_yaml_parse, stringify=_yaml_stringify),
        'json':       Engine(parse=_json_parse, stringify=_json_stringify),
        'javascript': Engine(parse=_expression_parse if unsafe_eval else _expression_disabled),
    }


def to_engine(value: Any) -> Engine:
    """Normalize an engine entry: Engine, bare parse function, or object/mapping with parse."""
    if isinstance(value, Engine):
        return value
    if isinstance(value, Mapping):
        if not callable(value.get('parse')):
            raise ValueError("engine mapping must provide a callable 'parse'")
        return Engine(parse=value['parse'], stringify=value.get('stringify'))
    if callable(getattr(value, 'parse', None)):
        return Engine(parse=value.parse, stringify=getattr(value, 'stringify', None))
    if callable(value):
        return Engine(parse=value)
    raise ValueError(f"expected an engine or parse function, got {type(value).__name__}")


def alias(name: str) -> str:
    """Resolve a lowercased engine alias to its canonical name."""
    lowered = name.lower()
    return ALIASES.get(lowered, lowered)


def resolve_engine(name: str, engines: Mapping[str, Engine]) -> Engine:
    """Look up `name`, then its alias; raise UnregisteredEngineError if neither is registered."""
    engine = engines.get(name)
    if engine is None:
        engine = engines.get(alias(name))
    if engine is None:
        raise UnregisteredEngineError(name)
    logger.debug("Resolved engine %r", name)
    return engine
