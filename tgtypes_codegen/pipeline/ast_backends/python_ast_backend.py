"""
Python AST-based code generation backend.

Generates Protocol family interfaces and dataclasses_json structs from IR
using the built-in ast module.
"""

from __future__ import annotations

import ast
import collections

from ... import __version__
from ..analyzer.ir_nodes import IR, FamilyDef, FieldDef, MethodDef, MethodKind, StructDef, TypeKind, TypeRef
from .base import AstBackend

STDLIB_MODULES = {"dataclasses", "typing"}
THIRD_PARTY_MODULES = {"dataclasses_json"}

# Defaults for optional fields that are neither nullable nor arrays
ZERO_VALUES = {
    "int": 0,
    "float": 0.0,
    "str": "",
    "bool": False,
}

METHOD_TEMPLATES = {
    MethodKind.TAGGED_ENCODE: "tagged_encode",
    MethodKind.ACCESSOR: "accessor",
    MethodKind.MEDIA_ACCESSOR: "media_accessor",
}

INDENT = "    "


class PythonAstBackend(AstBackend):
    """Python code generation backend using AST."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    def __init__(self, config):
        super().__init__(config)
        self.python_imports: set[tuple[str, str]] = set()
        self.runtime_module = config.runtime_module

    def generate(self, ir: IR) -> str:
        """Generate Python code from IR using AST."""
        # Reset import tracking
        self.python_imports = set()
        self.runtime_module = ir.runtime_module or self.config.runtime_module

        if self.config.use_future_annotations:
            self.python_imports.add(("__future__", "annotations"))

        class_nodes = []
        for declaration in ir.declarations:
            if isinstance(declaration, FamilyDef):
                class_nodes.append(self._generate_family(declaration))
            else:
                class_nodes.append(self._generate_struct(declaration))

        body: list[ast.stmt] = self._generate_imports()
        body.extend(class_nodes)

        module = ast.Module(body=body, type_ignores=[])
        ast.fix_missing_locations(module)
        code = ast.unparse(module)

        return self._post_process_code(code, ir)

    def _generate_imports(self) -> list[ast.stmt]:
        """Generate import statements as AST nodes."""
        import_groups: dict[str, set[str]] = collections.defaultdict(set)
        for module, name in self.python_imports:
            import_groups[module].add(name)

        ordered_modules = []
        if "__future__" in import_groups:
            ordered_modules.append("__future__")
        ordered_modules.extend(sorted(m for m in import_groups if m in STDLIB_MODULES))
        ordered_modules.extend(sorted(m for m in import_groups if m in THIRD_PARTY_MODULES))
        ordered_modules.extend(sorted(m for m in import_groups if m not in ordered_modules))

        return [
            ast.ImportFrom(
                module=module,
                names=[ast.alias(name=n, asname=None) for n in sorted(import_groups[module])],
                level=0,
            )
            for module in ordered_modules
        ]

    def _generate_family(self, family: FamilyDef) -> ast.ClassDef:
        """Generate a family interface as a runtime-checkable Protocol."""
        self.python_imports.add(("typing", "Protocol"))
        self.python_imports.add(("typing", "runtime_checkable"))

        body: list[ast.stmt] = []
        docstring = self._docstring(family.description, family.href)
        if docstring:
            body.append(docstring)

        if family.method:
            body.append(self._generate_method(family.method, stub=True))

        if not body:
            body.append(ast.Pass())

        return ast.ClassDef(
            name=family.name,
            bases=[ast.Name(id="Protocol", ctx=ast.Load())],
            keywords=[],
            body=body,
            decorator_list=[ast.Name(id="runtime_checkable", ctx=ast.Load())],
        )

    def _generate_struct(self, struct: StructDef) -> ast.ClassDef:
        """Generate a struct as a keyword-only dataclass."""
        self.python_imports.add(("dataclasses", "dataclass"))
        self.python_imports.add(("dataclasses_json", "DataClassJsonMixin"))

        decorators = [
            ast.Call(
                func=ast.Name(id="dataclass", ctx=ast.Load()),
                args=[],
                keywords=[ast.keyword(arg="kw_only", value=ast.Constant(value=True))],
            )
        ]

        body: list[ast.stmt] = []
        docstring = self._docstring(struct.description, struct.href)
        if docstring:
            body.append(docstring)

        for field in struct.fields:
            body.append(self._generate_field(field))
            if field.description:
                body.append(ast.Expr(value=ast.Constant(value=field.description)))

        for method in struct.methods:
            body.append(self._generate_method(method))

        if not body:
            body.append(ast.Pass())

        return ast.ClassDef(
            name=struct.name,
            bases=[ast.Name(id="DataClassJsonMixin", ctx=ast.Load())],
            keywords=[],
            body=body,
            decorator_list=decorators,
        )

    def _generate_field(self, field: FieldDef) -> ast.AnnAssign:
        """Generate a field definition as annotated assignment."""
        type_str = self.translate_type(field.type_ref)

        self.python_imports.add(("dataclasses", "field"))
        self.python_imports.add(("dataclasses_json", "config"))
        self.python_imports.add((self.runtime_module, "omit_empty"))

        metadata = []
        if field.name != field.original_name:
            metadata.append(f"field_name={field.original_name!r}")
        if field.uses_family_encoder:
            self.python_imports.add((self.runtime_module, "encode_family"))
            metadata.append("encoder=encode_family")
        metadata.append("exclude=omit_empty")

        arguments = []
        default = self._field_default(field)
        if default:
            arguments.append(default)
        arguments.append(f"metadata=config({', '.join(metadata)})")

        return ast.AnnAssign(
            target=ast.Name(id=field.name, ctx=ast.Store()),
            annotation=self._parse_expr(type_str),
            value=self._parse_expr(f"field({', '.join(arguments)})"),
            simple=1,
        )

    def _field_default(self, field: FieldDef) -> str | None:
        """Get the default argument of a field() call, None for required fields."""
        if field.is_required:
            return None

        type_ref = field.type_ref
        if type_ref.is_nullable:
            return "default=None"
        if type_ref.kind == TypeKind.ARRAY:
            return "default_factory=list"
        if type_ref.kind == TypeKind.PRIMITIVE:
            return f"default={ZERO_VALUES[type_ref.name]!r}"

        return "default=None"

    def _generate_method(self, method: MethodDef, stub: bool = False) -> ast.FunctionDef:
        """Render a method template and parse it into a function node."""
        if method.kind == MethodKind.TAGGED_ENCODE:
            self.python_imports.add(("typing", "Any"))
            self.python_imports.add((self.runtime_module, "with_type_tag"))
        elif method.kind == MethodKind.MEDIA_ACCESSOR:
            self.python_imports.add((self.runtime_module, "NamedReader"))
            if not stub:
                self.python_imports.add((self.runtime_module, "input_media_params"))

        source = self.render(METHOD_TEMPLATES[method.kind], method=method, stub=stub)
        return ast.parse(source, mode="exec").body[0]

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate IR type to Python type string."""
        result = self._translate_type_inner(type_ref)

        # Handle nullability
        if type_ref.is_nullable and not result.endswith(" | None"):
            result = f"{result} | None"

        return result

    def _translate_type_inner(self, type_ref: TypeRef) -> str:
        """Inner type translation without nullable handling."""
        if type_ref.kind == TypeKind.ARRAY:
            if type_ref.type_args:
                return f"list[{self.translate_type(type_ref.type_args[0])}]"
            return "list"

        return type_ref.name

    def _docstring(self, lines: list[str], href: str) -> ast.Expr | None:
        """Build a class docstring from description lines and the reference URL."""
        parts = [line for line in lines if line]
        if href:
            parts.extend(["", href] if parts else [href])
        if not parts:
            return None

        if len(parts) == 1:
            text = parts[0]
        else:
            indented = [parts[0]] + [INDENT + part if part else "" for part in parts[1:]]
            text = "\n".join(indented) + "\n" + INDENT

        return ast.Expr(value=ast.Constant(value=text))

    def _parse_expr(self, expr_str: str) -> ast.expr:
        """Parse an expression string into an AST expression."""
        return ast.parse(expr_str, mode="eval").body

    def _post_process_code(self, code: str, ir: IR) -> str:
        """Add the generation comment and PEP 8 spacing between top-level classes."""
        result = []

        if self.config.add_generation_comment:
            header = self.render(
                "prefix",
                version=__version__,
                api_version=ir.api_version,
                command_line=ir.command_line,
            )
            result.extend(header.rstrip("\n").split("\n"))
            result.append("")

        for line in code.split("\n"):
            starts_top_level = line.startswith("@") or line.startswith("class ")
            if starts_top_level and result and not result[-1].startswith("@"):
                while result and result[-1] == "":
                    result.pop()
                result.extend(["", ""])
            result.append(line)

        # Ensure file ends with newline
        if result and result[-1] != "":
            result.append("")

        return "\n".join(result)
