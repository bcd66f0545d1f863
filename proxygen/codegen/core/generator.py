"""
Base generator interface for all accessor-interface targets.

Defines the contract that all language generators implement and the
generation flow shared by them: derive names, validate them for the output
language, render through templates and write through a scoped sink.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .naming import NameCollision, NamingConvention, find_name_collisions, get_naming_convention
from .schema import ClassSchema, GeneratedInterface, MethodSignature, SchemaError
from .sinks import MemorySink, OutputSink
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)

SETTER_PARAMETER = "value"


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    def __init__(self, message: str, class_name: Optional[str] = None):
        super().__init__(message)
        self.class_name = class_name


class SinkUnavailable(GeneratorError):
    """The output destination could not be opened, written or committed."""

    def __init__(self, class_name: str, destination: str, cause: Exception):
        super().__init__(
            f"Cannot write interface for {class_name} to {destination}: {cause}",
            class_name,
        )
        self.destination = destination
        self.cause = cause


class InvalidFieldName(GeneratorError):
    """A derived accessor name is not a valid identifier in the output language."""

    def __init__(self, class_name: str, field_name: str, derived_name: str):
        super().__init__(
            f"Field {class_name}.{field_name} derives invalid method name "
            f"'{derived_name}'",
            class_name,
        )
        self.field_name = field_name
        self.derived_name = derived_name


class InvalidInterfaceName(GeneratorError):
    """The derived interface name is not a valid identifier."""

    def __init__(self, class_name: str, derived_name: str):
        super().__init__(
            f"Class {class_name} derives invalid interface name '{derived_name}'",
            class_name,
        )
        self.derived_name = derived_name


class InvalidPackageName(GeneratorError):
    """The configured package is not a valid namespace in the output language."""

    def __init__(self, class_name: str, package_name: str, problems: List[str]):
        super().__init__(
            f"Invalid package '{package_name}' for {class_name}: "
            + "; ".join(problems),
            class_name,
        )
        self.package_name = package_name
        self.problems = problems


class NameCollisionError(GeneratorError):
    """Distinct fields derive the same accessor name."""

    def __init__(self, class_name: str, collisions: List[NameCollision]):
        details = "; ".join(str(c) for c in collisions)
        super().__init__(
            f"Accessor name collision in {class_name}: {details}", class_name
        )
        self.collisions = collisions


class InterfaceGenerator(ABC):
    """Abstract base class for all accessor-interface generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if isinstance(config, GeneratorConfig):
            self.config = config
        else:
            self.config = load_config(self.language_name, custom_config=config)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(
            self.get_template_directory(), self.config.indent
        )

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    @abstractmethod
    def default_naming(self) -> str:
        """Name of the naming convention used when none is configured."""
        pass

    @property
    def template_name(self) -> str:
        return f"interface{self.file_extension}.j2"

    @abstractmethod
    def is_valid_identifier(self, name: str) -> bool:
        """Check a derived method or type name against the output syntax."""
        pass

    def validate_package(self, package_name: str) -> List[str]:
        """
        Check the configured package against the output syntax.

        Returns:
            Problems found (empty if the package is usable)
        """
        if not package_name:
            return []
        return [
            f"'{part}' is not a valid identifier"
            for part in package_name.split(".")
            if not self.is_valid_identifier(part)
        ]

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Returns:
            Path to template directory or None
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @property
    def naming(self) -> NamingConvention:
        """Naming convention selected by configuration."""
        return get_naming_convention(self.config.naming or self.default_naming)

    def qualified_name(self, interface_name: str) -> str:
        if not self.config.package_name:
            return interface_name
        return f"{self.config.package_name}.{interface_name}"

    # Generation flow

    def build_interface(
        self, schema: ClassSchema, naming: NamingConvention
    ) -> GeneratedInterface:
        """
        Derive the accessor interface for a schema.

        Fields are visited in declaration order; static and ignored fields
        are skipped. Each eligible field contributes its getter immediately
        followed by its setter.

        Raises:
            InvalidPackageName: If the configured package is invalid
            InvalidInterfaceName: If the derived interface name is invalid
            InvalidFieldName: If a derived accessor name is invalid
        """
        class_name = schema.simple_class_name
        problems = self.validate_package(self.config.package_name)
        if problems:
            raise InvalidPackageName(class_name, self.config.package_name, problems)

        interface_name = naming.proxy_interface_name(class_name)
        if not self.is_valid_identifier(interface_name):
            raise InvalidInterfaceName(class_name, interface_name)

        methods: List[MethodSignature] = []
        for descriptor in schema.fields:
            if descriptor.is_static or descriptor.is_ignored:
                continue

            getter = naming.getter_name(descriptor.name)
            setter = naming.setter_name(descriptor.name)
            for derived in (getter, setter):
                if not self.is_valid_identifier(derived):
                    raise InvalidFieldName(class_name, descriptor.name, derived)

            methods.append(
                MethodSignature(getter, descriptor.type_name, (), descriptor.name)
            )
            methods.append(
                MethodSignature(
                    setter,
                    self.void_type,
                    ((SETTER_PARAMETER, descriptor.type_name),),
                    descriptor.name,
                )
            )

        return GeneratedInterface(
            package_name=self.config.package_name,
            simple_name=interface_name,
            source_class=class_name,
            methods=tuple(methods),
        )

    @property
    def void_type(self) -> str:
        return "void"

    def get_template_context(self, interface: GeneratedInterface) -> Dict[str, Any]:
        """Build the template variables for one interface."""
        return {
            "package_name": interface.package_name,
            "interface_name": interface.simple_name,
            "qualified_name": interface.qualified_name,
            "source_class": interface.source_class,
            "accessors": [
                {
                    "field": getter.field_name,
                    "getter": getter,
                    "setter": setter,
                    "parameter_name": setter.parameters[0][0],
                    "parameter_type": setter.parameters[0][1],
                }
                for getter, setter in interface.accessor_pairs
            ],
            "add_comments": self.config.add_comments,
        }

    def render(self, interface: GeneratedInterface) -> str:
        """Render an interface to source text."""
        code = self.template_engine.render_template(
            self.template_name, self.get_template_context(interface)
        )
        code = self.format_code(code)
        if self.config.line_ending != "\n":
            code = code.replace("\n", self.config.line_ending)
        return code

    def generate(
        self, schema: ClassSchema, naming: NamingConvention, sink: OutputSink
    ) -> GeneratedInterface:
        """
        Generate the accessor interface for one schema into a sink.

        The sink is held only while the artifact is produced. Any failure
        discards what was written, so no partial artifact is committed.

        Args:
            schema: Model class description
            naming: Naming convention for accessors and the interface
            sink: Destination, owned by the caller

        Returns:
            The generated interface description

        Raises:
            SinkUnavailable: If the sink cannot be opened, written or committed
            InvalidPackageName: If the configured package is invalid
            InvalidFieldName: If a derived accessor name is invalid
        """
        return self._generate(schema, naming, sink)[0]

    def _generate(
        self, schema: ClassSchema, naming: NamingConvention, sink: OutputSink
    ) -> Tuple[GeneratedInterface, str]:
        class_name = schema.simple_class_name
        logger.debug("Generating interface for %s", class_name)

        try:
            # Every derived name is validated before the sink sees it
            interface = self.build_interface(schema, naming)
            qualified_name = interface.qualified_name
            with sink.open(qualified_name, self.file_extension) as stream:
                code = self.render(interface)
                stream.write(code)
        except OSError as e:
            destination = sink.describe(qualified_name, self.file_extension)
            logger.error("Sink unavailable for %s: %s", class_name, e)
            raise SinkUnavailable(class_name, destination, e) from e
        except GeneratorError as e:
            logger.error("Generation aborted for %s: %s", class_name, e)
            raise

        logger.info(
            "Generated %s (%d accessor pairs)",
            interface.qualified_name,
            len(interface.accessor_pairs),
        )
        return interface, code

    def generate_source(
        self, schema: ClassSchema, naming: Optional[NamingConvention] = None
    ) -> str:
        """Generate the interface for one schema and return its source text."""
        sink = MemorySink()
        self.generate(schema, naming or self.naming, sink)
        return sink.value

    def validate_schema(
        self, schema: ClassSchema, naming: Optional[NamingConvention] = None
    ) -> List[str]:
        """
        Validate a schema for basic structural issues.

        Returns:
            List of warning messages (empty if no issues)
        """
        naming = naming or self.naming
        warnings = []

        if not schema.fields:
            warnings.append(f"Schema '{schema.simple_class_name}' has no fields")
        elif not schema.eligible_fields():
            warnings.append(
                f"Schema '{schema.simple_class_name}' has no persisted fields "
                f"- will generate an empty interface"
            )

        for collision in find_name_collisions(schema, naming):
            warnings.append(
                f"Accessor name collision in {schema.simple_class_name}: {collision}"
            )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines to at most
        two and ends the text with exactly one newline.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        interface: Optional[GeneratedInterface] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            interface: Generated interface description
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.interface = interface
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(
        cls, message: str, exception: Exception = None, warnings: List[str] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="", warnings=warnings)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


class BatchResult:
    """Results of generating several classes, failures included."""

    def __init__(self):
        self.results: Dict[str, GenerationResult] = {}

    def add(self, class_name: str, result: GenerationResult) -> None:
        self.results[class_name] = result

    @property
    def success(self) -> bool:
        return all(r.success for r in self.results.values())

    @property
    def failures(self) -> Dict[str, GenerationResult]:
        return {name: r for name, r in self.results.items() if not r.success}

    @property
    def succeeded(self) -> List[str]:
        return [name for name, r in self.results.items() if r.success]


def generate_interface(
    generator: InterfaceGenerator,
    schema: ClassSchema,
    naming: Optional[NamingConvention] = None,
    sink: Optional[OutputSink] = None,
) -> GenerationResult:
    """
    Generate one interface with error handling.

    Args:
        generator: Interface generator instance
        schema: Schema to generate the interface for
        naming: Naming convention (defaults to the generator's)
        sink: Destination (defaults to an in-memory sink)

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    naming = naming or generator.naming
    sink = sink or MemorySink()
    warnings = generator.validate_schema(schema, naming)

    try:
        interface, code = generator._generate(schema, naming, sink)
    except (GeneratorError, TemplateError) as e:
        return GenerationResult.error(str(e), exception=e, warnings=warnings)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "naming": naming.name,
        "class_name": schema.simple_class_name,
        "qualified_name": interface.qualified_name,
        "destination": sink.describe(interface.qualified_name, generator.file_extension),
        "field_count": len(schema.fields),
        "accessor_pairs": len(interface.accessor_pairs),
    }
    return GenerationResult(code, interface, warnings, metadata)


def generate_interfaces(
    generator: InterfaceGenerator,
    schemas: Iterable[ClassSchema],
    naming: Optional[NamingConvention] = None,
    sink: Optional[OutputSink] = None,
) -> BatchResult:
    """
    Generate interfaces for several classes.

    A failing class does not stop the batch. Schemas whose eligible fields
    derive colliding accessor names are rejected before their sink is opened.

    Raises:
        SchemaError: If two schemas share a class name

    Returns:
        BatchResult with one result per class
    """
    schemas = list(schemas)
    seen = set()
    for schema in schemas:
        if schema.simple_class_name in seen:
            raise SchemaError(f"Duplicate class '{schema.simple_class_name}' in batch")
        seen.add(schema.simple_class_name)

    naming = naming or generator.naming
    sink = sink or MemorySink()
    batch = BatchResult()

    for schema in schemas:
        collisions = find_name_collisions(schema, naming)
        if collisions:
            error = NameCollisionError(schema.simple_class_name, collisions)
            logger.error("%s", error)
            batch.add(
                schema.simple_class_name,
                GenerationResult.error(str(error), exception=error),
            )
            continue

        batch.add(
            schema.simple_class_name,
            generate_interface(generator, schema, naming, sink),
        )

    failed = len(batch.failures)
    if failed:
        logger.warning(
            "%d of %d interfaces failed to generate", failed, len(batch.results)
        )
    return batch
