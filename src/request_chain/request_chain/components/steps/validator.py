# ABOUTME: Validator step adapting pydantic schemas or field maps to chain steps
# ABOUTME: Replaces a request location with its validated value or raises ValidationFailure

import keyword
from collections.abc import Mapping
from typing import Annotated, Any, Callable, Dict, Literal, Optional, Set, Type, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, create_model
from pydantic.fields import FieldInfo

from request_chain.exceptions import HandlerConfigurationError, MalformedRequestError, ValidationFailure
from request_chain.interfaces.chain import AbstractResponseSink, AbstractStep, Proceed
from request_chain.models.chain.enum import StepKind
from request_chain.models.http.enum import ValidationTarget
from request_chain.models.http.request import ChainRequest

SchemaInput = Union[Type[BaseModel], TypeAdapter, Mapping[str, Any]]
ExtraPolicy = Literal["ignore", "forbid", "allow"]


def is_parse_capable(schema: Any) -> bool:
    """
    Check whether a value exposes pydantic's parse contract.

    Args:
        schema: Candidate schema.

    Returns:
        bool: True for BaseModel subclasses and TypeAdapter-like objects.
    """
    if isinstance(schema, type):
        return issubclass(schema, BaseModel)
    return callable(getattr(schema, "validate_python", None))


def _field_name(key: str) -> Optional[str]:
    """Return ``key`` if it can be a model field name, None if it needs an alias."""
    if key.isidentifier() and not keyword.iskeyword(key) and not key.startswith(("_", "model_")):
        return key
    return None


def _with_alias(definition: Any, alias: str) -> tuple:
    if isinstance(definition, tuple) and len(definition) == 2:
        annotation, default = definition
        if isinstance(default, FieldInfo):
            return Annotated[annotation, default], Field(alias=alias)
        return annotation, Field(default, alias=alias)
    return definition, Field(..., alias=alias)


def _synthetic_name(index: int, taken: Set[str]) -> str:
    """Return a field name for an aliased key that no other field uses."""
    name = f"field_{index}"
    while name in taken:
        name = f"{name}_"
    taken.add(name)
    return name


def build_field_map_model(
    fields: Mapping[str, Any],
    model_name: str,
    extra: ExtraPolicy = "ignore",
) -> Type[BaseModel]:
    """
    Synthesize a pydantic model from a field map.

    Each value is a type (``str``, ``Annotated[...]``, a BaseModel subclass) for
    a required field, or a ``(type, default)`` tuple. Keys that are not valid
    attribute names, such as ``x-api-key`` headers, become aliased fields.

    Args:
        fields: Field name to field definition.
        model_name: Name of the generated model.
        extra: Extra-field policy of the generated model.

    Returns:
        The generated BaseModel subclass.

    Raises:
        HandlerConfigurationError: If pydantic rejects a field definition.
    """
    definitions: Dict[str, Any] = {}
    taken = {name for name in (_field_name(key) for key in fields if isinstance(key, str)) if name}
    for index, (key, definition) in enumerate(fields.items()):
        if not isinstance(key, str):
            raise HandlerConfigurationError(
                f"Field names must be strings, got {type(key).__name__}",
                code="INVALID_FIELD_NAME",
                details={"model": model_name, "field": repr(key)},
            )
        name = _field_name(key)
        if name is None:
            definitions[_synthetic_name(index, taken)] = _with_alias(definition, key)
        elif isinstance(definition, tuple) and len(definition) == 2:
            definitions[name] = definition
        else:
            definitions[name] = (definition, ...)

    try:
        return create_model(
            model_name,
            __config__=ConfigDict(extra=extra),
            **definitions,
        )
    except (TypeError, ValueError) as e:
        raise HandlerConfigurationError(
            f"Invalid field map for {model_name}: {e}",
            code="INVALID_SCHEMA",
            details={"model": model_name, "fields": list(fields)},
        ) from e


class ValidatorStep(AbstractStep):
    """
    Step validating one request location against a schema.

    The schema is resolved once at construction: a BaseModel subclass or a
    TypeAdapter is used as-is, a plain field map is turned into a generated
    model. On success the request location is replaced with the validated
    value, dumped to a plain dict when the schema produced a model.
    """

    kind = StepKind.VALIDATOR

    def __init__(
        self,
        target: Union[ValidationTarget, str],
        schema: SchemaInput,
        extra: ExtraPolicy = "ignore",
    ):
        """
        Initialize the validator step.

        Args:
            target: Request location to validate.
            schema: BaseModel subclass, TypeAdapter, or field map.
            extra: Extra-field policy for schemas generated from field maps.

        Raises:
            HandlerConfigurationError: If the target is unknown or the schema unusable.
        """
        try:
            self.target = ValidationTarget(target)
        except ValueError as e:
            raise HandlerConfigurationError(
                f"Unknown validation target {target!r}. Must be one of: "
                f"{', '.join(t.value for t in ValidationTarget)}",
                code="UNKNOWN_TARGET",
                details={"target": str(target)},
            ) from e

        super().__init__(f"validate:{self.target.value}")
        self._logger = logger.bind(name=f"{__name__}.{self.target.value}")

        self._dump_by_alias = False
        if is_parse_capable(schema):
            self.schema = schema
        elif isinstance(schema, Mapping):
            self.schema = build_field_map_model(
                schema, f"{self.target.value.capitalize()}Schema", extra=extra
            )
            self._dump_by_alias = True
        else:
            raise HandlerConfigurationError(
                f"Cannot validate {self.target.value} with {type(schema).__name__}: "
                "expected a pydantic model, a TypeAdapter or a mapping of field schemas",
                code="INVALID_SCHEMA",
                details={"target": self.target.value, "schema_type": type(schema).__name__},
            )

        self._validate = self._resolve_validate(self.schema)

    @staticmethod
    def _resolve_validate(schema: Any) -> Callable[[Any], Any]:
        if isinstance(schema, type):
            return schema.model_validate
        return schema.validate_python

    async def __call__(
        self,
        request: ChainRequest,
        response: AbstractResponseSink,
        proceed: Proceed,
        context: Dict[str, Any],
    ) -> Dict[str, Any]:
        value = request.get_location(self.target)

        if not isinstance(value, (Mapping, list)):
            self._logger.debug(f"Request {self.target.value} is {type(value).__name__}, not an object")
            raise MalformedRequestError(self.target.value, details={"value_type": type(value).__name__})

        try:
            validated = self._validate(value)
        except ValidationError as e:
            failure = ValidationFailure.from_pydantic(e, self.target.value)
            self._logger.debug(f"Validation of {self.target.value} failed with {len(failure.errors)} error(s)")
            raise failure from e

        if isinstance(validated, BaseModel):
            validated = validated.model_dump(by_alias=self._dump_by_alias)

        request.set_location(self.target, validated)
        return {}

    def describe(self) -> Dict[str, Any]:
        description = super().describe()
        description["target"] = self.target.value
        description["schema"] = getattr(self.schema, "__name__", type(self.schema).__name__)
        return description
