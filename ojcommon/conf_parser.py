import dataclasses
import logging
import re
import tomllib
import types
import typing


logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception for critical configuration errors."""

    pass


class ConfigTypeError(ConfigError):
    def __init__(self, path: str, expected: str, got: object):
        msg = f"Expected {path} to be {expected}, got {type(got).__name__}"
        super().__init__(msg)


_T = typing.TypeVar("_T")


def load_config_file(config_file_path: str, config_class: type[_T]) -> _T:
    """
    Load a TOML config file into a config class, checking for type errors.

    config_class must be a dataclass. Each of its fields must have a type that
    is either one of the basic TOML types (str, int, float, bool), another
    dataclass satisfying the same rules, a list[T] or tuple[T, ...] with T
    satisfying these rules, a dict[str, T], or an optional form (T | None) of
    any of the above.

    If a dataclass field's name ends with "_", the corresponding TOML key does
    not have the underscore, so that keys can be python keywords ("global").

    config_file_path: path to the TOML file.
    config_class: dataclass to load the configuration into.

    raise (FileNotFoundError): if the file does not exist.
    raise (ConfigError): if the content does not match the dataclass.

    """
    with open(config_file_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {config_file_path}: {e}")
    return parse_config_obj(data, config_class, "")


def format_key(key: str) -> str:
    if re.fullmatch(r"[A-Za-z0-9_-]+", key):
        return key
    # Good enough for error messages.
    return repr(key)


def join_path(path: str, new_part: str) -> str:
    if path != "":
        return path + "." + new_part
    return new_part


def _parse_dataclass(data: object, obj_class, path: str):
    if not isinstance(data, dict):
        raise ConfigTypeError(path, "a table", data)
    data = dict(data)
    kw_args = {}
    hints = typing.get_type_hints(obj_class)
    for field in dataclasses.fields(obj_class):
        if not field.init:
            continue
        config_name = field.name.removesuffix("_")
        field_path = join_path(path, format_key(config_name))

        is_required = (
            field.default is dataclasses.MISSING
            and field.default_factory is dataclasses.MISSING
        )
        if config_name not in data:
            if is_required:
                raise ConfigError(f"Key {field_path} is required")
            continue

        kw_args[field.name] = parse_config_obj(
            data.pop(config_name), hints[field.name], field_path)

    for k in data:
        logger.warning("Unrecognized key %s in config, ignoring.",
                       join_path(path, format_key(k)))

    return obj_class(**kw_args)


def parse_config_obj(data: object, obj_class: type[_T], path: str) -> _T:
    """Convert the TOML value data into an instance of obj_class.

    path is the dotted location of data inside the file, for errors.

    """
    origin = typing.get_origin(obj_class)

    if origin in (typing.Union, types.UnionType):
        # Only "T | None" is supported. TOML has no null, so a value that is
        # present must match T.
        args = typing.get_args(obj_class)
        assert len(args) == 2 and args[1] is type(None)
        return parse_config_obj(data, args[0], path)

    if dataclasses.is_dataclass(obj_class):
        return _parse_dataclass(data, obj_class, path)

    if origin is dict:
        key_type, value_type = typing.get_args(obj_class)
        assert key_type is str
        if not isinstance(data, dict):
            raise ConfigTypeError(path, "a table", data)
        return typing.cast(_T, {
            k: parse_config_obj(v, value_type, join_path(path, format_key(k)))
            for k, v in data.items()})

    if origin in (list, tuple):
        args = typing.get_args(obj_class)
        if origin is tuple:
            assert len(args) == 2 and args[1] is Ellipsis
        if not isinstance(data, list):
            raise ConfigTypeError(path, "a list", data)
        result = [parse_config_obj(x, args[0], path + f"[{i}]")
                  for i, x in enumerate(data)]
        return origin(result)  # type: ignore

    if obj_class is bool:
        if not isinstance(data, bool):
            raise ConfigTypeError(path, "bool", data)
        return data

    if obj_class in (str, int):
        # bool is a subclass of int, reject it explicitly.
        if not isinstance(data, obj_class) or isinstance(data, bool):
            raise ConfigTypeError(path, obj_class.__name__, data)
        return data

    if obj_class is float:
        # Allow specifying floats as ints.
        if not isinstance(data, int | float) or isinstance(data, bool):
            raise ConfigTypeError(path, "float", data)
        return typing.cast(_T, float(data))

    raise AssertionError(f"Unsupported type found in configuration: {obj_class}")
