"""
Pipeline generator.

Runs the phases in order: analyze the API description into IR, emit Python
source, optionally format it, and write it out.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import OutputError
from .analyzer import SchemaAnalyzer
from .ast_backends import PythonAstBackend
from .config import CodeGeneratorConfig, OutputMode
from .formatters import get_formatter
from .schema.nodes import APIDescription
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates Python type definitions from an API description."""

    def __init__(
        self,
        description: APIDescription,
        config: CodeGeneratorConfig | None = None,
        command_line: str = "",
    ):
        """
        Initialize the generator.

        Args:
            description: The loaded API description
            config: Code generation configuration
            command_line: Command recorded in the generation comment
        """
        self.description = description
        self.config = config or CodeGeneratorConfig()
        self.command_line = command_line

    def generate(self) -> str:
        """
        Generate the source text.

        Returns:
            Generated Python module

        Raises:
            SchemaError: If the description cannot be turned into types
        """
        ir = SchemaAnalyzer(self.config).analyze(self.description)
        ir.command_line = self.command_line

        code = PythonAstBackend(self.config).generate(ir)

        if self.config.formatter.enabled:
            formatter = get_formatter(self.config.formatter.backend)
            if formatter.is_available():
                code = formatter.format(code, self.config.formatter)
            else:
                logger.warning("%s is not installed, leaving generated code unformatted", formatter.name)

        logger.info("Generated %d declarations", len(ir.declarations))
        return code

    def write(self, path: str | Path) -> str:
        """
        Generate and write the source text.

        Nothing is written when generation fails.

        Args:
            path: Output file path

        Returns:
            The generated code

        Raises:
            SchemaError: If the description cannot be turned into types
            OutputError: If the output cannot be written
        """
        path = Path(path)
        code = self.generate()
        output = self.config.output
        writer = AtomicWriter()

        if output.atomic_write:
            if output.mode == OutputMode.ERROR_IF_EXISTS:
                writer.write_if_not_exists(path, code, validate=output.validate_before_write)
            else:
                writer.write(path, code, validate=output.validate_before_write)
            return code

        if output.mode == OutputMode.ERROR_IF_EXISTS and path.exists():
            raise OutputError(f"Output file already exists: {path}. Use force mode to overwrite.")
        if output.validate_before_write:
            writer.validate(code)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
        logger.info("Wrote %s", path)
        return code
