"""Per-language configuration: extensions, comment style, import and definition kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CommentStyle(Enum):
    """Line-comment syntax used by a language."""

    HASH = "hash"
    C_STYLE = "c_style"
    PASCAL = "pascal"


@dataclass(frozen=True)
class LangConfig:
    """Configuration for one supported language."""

    name: str
    extensions: tuple[str, ...]
    comment_style: CommentStyle
    import_kinds: tuple[str, ...]
    node_kinds: tuple[str, ...]

    @staticmethod
    def from_name(name: str) -> LangConfig | None:
        """Return the configuration for a language, or None."""
        return LANG_CONFIGS.get(name)

    @staticmethod
    def all_languages() -> list[str]:
        """Names of all supported languages."""
        return list(LANG_CONFIGS)

    @staticmethod
    def is_supported(name: str) -> bool:
        """Whether a language name is known."""
        return name in LANG_CONFIGS


def _config(name, extensions, style, import_kinds, node_kinds) -> LangConfig:
    return LangConfig(name, tuple(extensions), style, tuple(import_kinds), tuple(node_kinds))


LANG_CONFIGS: dict[str, LangConfig] = {
    cfg.name: cfg
    for cfg in (
        _config(
            "rust",
            ["rs"],
            CommentStyle.C_STYLE,
            ["use_declaration"],
            [
                "function_item",
                "function_declaration",
                "struct_item",
                "impl_item",
                "enum_item",
                "trait_item",
                "type_alias",
            ],
        ),
        _config(
            "python",
            ["py", "pyi", "pyw"],
            CommentStyle.HASH,
            ["import_statement", "import_from_statement"],
            ["class_definition", "function_definition", "async_function_definition"],
        ),
        _config(
            "ruby",
            ["rb"],
            CommentStyle.HASH,
            ["require", "require_relative", "load"],
            ["class", "module", "method", "singleton_method", "block"],
        ),
        _config(
            "java",
            ["java"],
            CommentStyle.C_STYLE,
            ["import_declaration"],
            [
                "class",
                "class_declaration",
                "interface_declaration",
                "method_declaration",
                "constructor_declaration",
            ],
        ),
        _config(
            "go",
            ["go"],
            CommentStyle.C_STYLE,
            ["import_declaration"],
            ["function_declaration", "method_declaration"],
        ),
        _config(
            "javascript",
            ["js", "mjs", "cjs", "jsx"],
            CommentStyle.C_STYLE,
            ["import_statement", "import_clause"],
            ["class", "class_declaration", "function_declaration", "arrow_function"],
        ),
        _config(
            "typescript",
            ["ts", "tsx"],
            CommentStyle.C_STYLE,
            ["import_statement", "import_clause"],
            [
                "class",
                "class_declaration",
                "function_declaration",
                "arrow_function",
                "method_definition",
            ],
        ),
        _config(
            "c",
            ["c", "h"],
            CommentStyle.C_STYLE,
            ["preproc_include"],
            ["function_definition"],
        ),
        _config(
            "cpp",
            ["cpp", "cc", "cxx", "hpp", "hh", "hxx"],
            CommentStyle.C_STYLE,
            ["using_declaration", "preproc_include"],
            ["function_definition", "method_definition"],
        ),
        _config(
            "scala",
            ["scala"],
            CommentStyle.C_STYLE,
            ["import_declaration"],
            [
                "class_definition",
                "object_definition",
                "trait_definition",
                "function_definition",
            ],
        ),
        _config(
            "lua",
            ["lua"],
            CommentStyle.HASH,
            [],
            ["function_declaration", "local_function_declaration"],
        ),
        _config(
            "php",
            ["php"],
            CommentStyle.C_STYLE,
            ["use_declaration", "use_group_declaration"],
            [
                "class_declaration",
                "trait_declaration",
                "interface_declaration",
                "method_declaration",
                "function_definition",
            ],
        ),
        _config(
            "bash",
            ["sh", "bash", "zsh"],
            CommentStyle.HASH,
            [],
            ["function_definition"],
        ),
        _config(
            "zig",
            ["zig"],
            CommentStyle.C_STYLE,
            ["usingnamespace", "const_declaration", "comptime"],
            ["function_declaration", "method_definition", "struct", "enum", "union"],
        ),
        _config(
            "elixir",
            ["ex", "exs"],
            CommentStyle.HASH,
            ["import", "require", "alias", "use"],
            ["module", "function", "clauses", "do_block"],
        ),
        _config(
            "kotlin",
            ["kt", "kts"],
            CommentStyle.C_STYLE,
            ["import_directive"],
            ["class", "function_declaration", "method_declaration", "object_declaration"],
        ),
        _config(
            "swift",
            ["swift"],
            CommentStyle.C_STYLE,
            ["import_declaration"],
            [
                "class_declaration",
                "struct_declaration",
                "function_declaration",
                "method_declaration",
            ],
        ),
    )
}


def get_extension_lang(ext: str) -> str | None:
    """Return the language name for a file extension (without dot), or None."""
    return next(
        (name for name, cfg in LANG_CONFIGS.items() if ext in cfg.extensions),
        None,
    )


def all_definition_kinds() -> list[str]:
    """Every definition node kind across all languages, without duplicates."""
    return list(dict.fromkeys(kind for cfg in LANG_CONFIGS.values() for kind in cfg.node_kinds))