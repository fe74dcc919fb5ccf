# PixelStag Filters - Base Classes
"""
Base classes for the filter system.

All filters are dataclasses with JSON serialization support and can be
applied to images as well as to color sequences.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, MISSING
from typing import Any, ClassVar, Sequence
import json
import re

from pixelstag.color import Color, ColorSequence
from pixelstag.image import Image

# Global registries
FILTER_REGISTRY: dict[str, type['Filter']] = {}
FILTER_ALIASES: dict[str, type['Filter'] | tuple[type['Filter'], dict[str, Any]]] = {}


def register_filter(cls: type['Filter']) -> type['Filter']:
    """Decorator to register a filter class."""
    FILTER_REGISTRY[cls.__name__] = cls
    # Also register lowercase version
    FILTER_REGISTRY[cls.__name__.lower()] = cls
    return cls


def register_alias(
    alias: str,
    cls: type['Filter'],
    **default_params: Any
) -> None:
    """Register an alias for a filter class with optional default parameters.

    Examples:
        register_alias('blur', GaussianBlur)  # Simple alias
        register_alias('thumb', Downsample, width=16, height=16)
    """
    if default_params:
        FILTER_ALIASES[alias.lower()] = (cls, default_params)
    else:
        FILTER_ALIASES[alias.lower()] = cls


def _lookup(name: str) -> tuple[type['Filter'] | None, dict[str, Any]]:
    """Find a filter class by alias or registered name."""
    alias_entry = FILTER_ALIASES.get(name)
    if alias_entry is None:
        return FILTER_REGISTRY.get(name), {}
    if isinstance(alias_entry, tuple):
        # Alias with default parameters: (cls, {params})
        return alias_entry
    return alias_entry, {}


@dataclass
class Filter(ABC):
    """Base class for all filters.

    Subclasses implement :meth:`apply` for images and may implement
    :meth:`apply_colors` for color sequences.

    Example:
        @register_filter
        @dataclass
        class MyFilter(Filter):
            strength: float = 1.0

            def apply(self, image: Image) -> Image:
                ...
    """

    # Primary parameter name for string parsing (e.g., 'strength' for GaussianBlur)
    _primary_param: ClassVar[str | None] = None

    @abstractmethod
    def apply(self, image: Image) -> Image:
        """Apply filter to image and return result.

        :param image: The input image. It is not modified.
        :returns: The processed image.
        """
        pass

    def apply_colors(self, colors: Sequence[Color]) -> ColorSequence:
        """Apply filter to a color sequence and return the result.

        :param colors: The input colors. They are not modified.
        :returns: The processed colors.
        """
        raise TypeError(f"{self.type} can not be applied to color sequences")

    def __call__(self, source: Image | Sequence[Color]) -> Image | ColorSequence:
        """Apply filter to an image or a color sequence.

        :param source: Single Image or sequence of colors to process.
        :returns: Processed Image or list of colors (same kind as input).
        """
        if isinstance(source, Image):
            return self.apply(source)
        return self.apply_colors(source)

    @property
    def type(self) -> str:
        """Filter type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        """Serialize filter to dictionary."""
        data = {}
        for f in fields(self):
            if not f.name.startswith('_'):
                data[f.name] = getattr(self, f.name)
        data['type'] = self.type
        return data

    def to_json(self) -> str:
        """Serialize filter to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Filter':
        """Deserialize filter from dictionary."""
        data = data.copy()  # Don't modify original
        filter_type = data.pop('type', cls.__name__)

        filter_cls = FILTER_REGISTRY.get(filter_type) or FILTER_REGISTRY.get(filter_type.lower())
        if filter_cls is None:
            raise ValueError(f"Unknown filter type: {filter_type}")

        # Composite filters such as FilterPipeline deserialize their children
        if filter_cls.from_dict.__func__ is not Filter.from_dict.__func__:
            return filter_cls.from_dict(data)
        return _create(filter_cls, data)

    @classmethod
    def from_json(cls, json_str: str) -> 'Filter':
        """Deserialize filter from JSON string."""
        return cls.from_dict(json.loads(json_str))

    @classmethod
    def parse(cls, text: str) -> 'Filter':
        """Parse single filter from compact string format.

        Supports two syntaxes:
        1. Compact syntax (space-separated):
            'blur 2.5'          -> GaussianBlur(strength=2.5)
            'downsample 32 16'  -> Downsample(width=32, height=16)
            'blur strength=1'   -> GaussianBlur(strength=1)

        2. Parentheses syntax:
            'blur(1.5)'
            'downsample(width=8, height=8)'
        """
        text = text.strip()

        match = re.match(r'^(\w+)\(([^)]*)\)$', text)
        if match:
            return cls._parse_parentheses(match.group(1).lower(), match.group(2))

        parts = text.split()
        if not parts:
            raise ValueError(f"Invalid filter format: {text}")

        name = parts[0].lower()
        filter_cls, default_params = _lookup(name)
        if filter_cls is None:
            raise ValueError(f"Unknown filter: {name}")

        # Start with default params from alias, then override with user args
        kwargs = dict(default_params)

        positional = []
        for arg in parts[1:]:
            if '=' in arg:
                key, value = arg.split('=', 1)
                kwargs[key.strip()] = _parse_value(value)
            else:
                positional.append(_parse_value(arg))

        if positional:
            kwargs = cls._map_positional_args(filter_cls, positional, kwargs)

        return _create(filter_cls, kwargs)

    @classmethod
    def _parse_parentheses(cls, name: str, args_str: str) -> 'Filter':
        """Parse the parentheses syntax."""
        filter_cls, default_params = _lookup(name)
        if filter_cls is None:
            raise ValueError(f"Unknown filter: {name}")

        kwargs = dict(default_params)
        if args_str:
            for i, arg in enumerate(args_str.split(',')):
                arg = arg.strip()
                if not arg:
                    continue
                if '=' in arg:
                    key, value = arg.split('=', 1)
                    kwargs[key.strip()] = _parse_value(value)
                elif i == 0 and filter_cls._primary_param:
                    kwargs[filter_cls._primary_param] = _parse_value(arg)
                else:
                    raise ValueError(f"Positional arg not supported for {name}: {arg}")

        return _create(filter_cls, kwargs)

    @classmethod
    def _map_positional_args(
        cls,
        filter_cls: type['Filter'],
        positional: list[Any],
        kwargs: dict[str, Any]
    ) -> dict[str, Any]:
        """Map positional arguments to filter parameters in field order."""
        param_names = [f.name for f in fields(filter_cls) if not f.name.startswith('_')]

        for i, value in enumerate(positional):
            if i >= len(param_names):
                raise ValueError(
                    f"Too many positional args for {filter_cls.__name__}: "
                    f"got {len(positional)}, max {len(param_names)}"
                )
            if param_names[i] not in kwargs:  # Don't override explicit kwargs
                kwargs[param_names[i]] = value

        return kwargs

    def to_string(self) -> str:
        """Convert filter to compact string format, e.g. 'gaussianblur strength=1.5'.

        Parameters at their default value are omitted.
        """
        parts = [self.type.lower()]
        for f in fields(self):
            if f.name.startswith('_'):
                continue
            value = getattr(self, f.name)
            if f.default is not MISSING and value == f.default:
                continue
            if isinstance(value, bool):
                value_str = 'true' if value else 'false'
            else:
                value_str = str(value)
            parts.append(f"{f.name}={value_str}")
        return ' '.join(parts)


def _parse_value(s: str) -> int | float | bool | str | None:
    """Parse string value to appropriate type.

    Handles:
    - Booleans: true, false
    - None: none
    - Integers: 42, -5
    - Floats: 3.14, -0.5
    - Quoted strings: 'hello', "world" -> hello, world
    - Plain strings: anything else
    """
    s = s.strip()

    if (s.startswith("'") and s.endswith("'")) or (s.startswith('"') and s.endswith('"')):
        return s[1:-1]

    if s.lower() == 'true':
        return True
    if s.lower() == 'false':
        return False
    if s.lower() == 'none':
        return None
    try:
        return int(s)
    except ValueError:
        pass
    try:
        return float(s)
    except ValueError:
        pass
    return s


def _create(filter_cls: type['Filter'], kwargs: dict[str, Any]) -> 'Filter':
    """Instantiate a filter, reporting unknown parameters as ValueError."""
    try:
        return filter_cls(**kwargs)
    except TypeError as e:
        raise ValueError(f"Invalid parameters for {filter_cls.__name__}: {e}") from e
