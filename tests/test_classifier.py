"""Tests for the import classifier — runtime / type-only / mixed statements."""

from __future__ import annotations

from pathlib import Path

import pytest

from deps_finder.engines.import_classifier.classifier import (
    classify,
    classify_file,
    strip_comments,
)
from deps_finder.engines.import_classifier.models import ImportKind


def _kinds(content: str) -> list[tuple[str, ImportKind]]:
    return [(f.package_name, f.kind) for f in classify(content)]


RUNTIME = ImportKind.RUNTIME
TYPE_ONLY = ImportKind.TYPE_ONLY


# ── runtime ──


class TestRuntimeImports:
    @pytest.mark.parametrize(
        ("content", "package"),
        [
            ("import React from 'react';", "react"),
            ('import * as R from "ramda";', "ramda"),
            ("import { pipe, flow } from '@mobily/ts-belt';", "@mobily/ts-belt"),
            ("import React, { useState } from 'react';", "react"),
            ("import 'reflect-metadata';", "reflect-metadata"),
            ("export * from 'zod';", "zod"),
            ("export { default as Button } from '@ui/kit/button';", "@ui/kit"),
            ("const express = require('express');", "express"),
            ('const { join } = require("lodash/fp");', "lodash"),
            ("const mod = require(`dayjs`);", "dayjs"),
            ("const chart = await import('chart.js');", "chart.js"),
            ("import { signIn } from 'next-auth/react';", "next-auth"),
        ],
    )
    def test_single_runtime(self, content, package):
        assert _kinds(content) == [(package, RUNTIME)]

    def test_type_named_default_binding_is_runtime(self):
        # A default import named "type" is not a type-only statement.
        assert _kinds("import type from 'typelib';") == [("typelib", RUNTIME)]

    def test_default_plus_inline_type(self):
        assert _kinds("import React, { type FC } from 'react';") == [("react", RUNTIME)]

    def test_not_an_import(self):
        assert classify("export const foo = 'bar';\nconst url = import.meta.url;") == []


# ── type-only ──


class TestTypeOnlyImports:
    @pytest.mark.parametrize(
        ("content", "package"),
        [
            ("import type { X } from 'type-only-lib';", "type-only-lib"),
            ("import type X from 'pkg';", "pkg"),
            ("import type * as T from 'pkg';", "pkg"),
            ("export type { Session } from '@auth/core/types';", "@auth/core"),
            ("type Mod = typeof import('lib');", "lib"),
        ],
    )
    def test_single_type_only(self, content, package):
        assert _kinds(content) == [(package, TYPE_ONLY)]


# ── mixed ──


class TestMixedImports:
    def test_some_runtime_binding(self):
        assert _kinds("import { type A, B } from 'pkg';") == [("pkg", RUNTIME)]

    def test_aliased_type_binding(self):
        assert _kinds("import { type Foo as Bar, baz } from 'pkg';") == [("pkg", RUNTIME)]

    def test_all_type_bindings(self):
        assert _kinds("import { type A, type B } from 'pkg';") == [("pkg", TYPE_ONLY)]

    def test_multiline_all_type(self):
        content = "import {\n  type Foo,\n  type Bar,\n} from 'types-pkg';\n"
        assert _kinds(content) == [("types-pkg", TYPE_ONLY)]

    def test_classified_once(self):
        findings = classify("import { type A, B } from 'pkg';\nimport { type C } from 'pkg';")
        assert [f.kind for f in findings] == [RUNTIME, TYPE_ONLY]


# ── filtering ──


class TestFiltering:
    def test_relative_dropped(self):
        assert classify("import a from './a';\nimport b from '../b';") == []

    def test_builtins_dropped(self):
        content = (
            "import fs from 'fs';\n"
            "import { readFile } from 'node:fs/promises';\n"
            "import { test } from 'bun:test';\n"
            "const path = require('path');\n"
        )
        assert classify(content) == []

    def test_url_dropped(self):
        assert classify("import x from 'https://esm.sh/x';") == []

    def test_bare_test_package_kept(self):
        assert _kinds("import test from 'test';") == [("test", RUNTIME)]


# ── comments ──


class TestComments:
    def test_commented_imports_ignored(self):
        content = (
            "// import React from 'react';\n"
            "/* import { pipe } from '@mobily/ts-belt'; */\n"
            "import express from 'express';\n"
        )
        findings = classify(content)
        assert [(f.package_name, f.line) for f in findings] == [("express", 3)]

    def test_comment_inside_brace_list(self):
        content = "import {\n  a, // first\n  b,\n} from 'x';"
        assert _kinds(content) == [("x", RUNTIME)]

    def test_comment_opener_inside_string(self):
        content = "const files = glob('src/*.ts');\nimport React from 'react';\n/* note */\n"
        findings = classify(content)
        assert [(f.package_name, f.line) for f in findings] == [("react", 2)]

    def test_line_comment_inside_string(self):
        content = 'const sep = "//";\nimport x from \'x\';\n'
        assert _kinds(content) == [("x", RUNTIME)]

    def test_multiline_template_literal_keeps_lines(self):
        content = "const t = `a\n/* b`;\nimport x from 'x';\n"
        findings = classify(content)
        assert [(f.package_name, f.line) for f in findings] == [("x", 3)]

    def test_apostrophe_inside_comment(self):
        content = "// don't load 'legacy'\nimport x from 'x';\n"
        assert _kinds(content) == [("x", RUNTIME)]

    def test_strip_comments_keeps_line_breaks(self):
        text = "a /* x\ny */ b\n// c\nd"
        stripped = strip_comments(text)
        assert stripped.count("\n") == text.count("\n")
        assert "x" not in stripped
        assert "c" not in stripped


# ── locations ──


class TestLocations:
    def test_line_numbers(self):
        content = "\n\nimport a from 'a';\n/*\n multi\n*/\nimport b from 'b';\n"
        findings = classify(content, file="src/index.ts")
        assert [(f.package_name, f.line) for f in findings] == [("a", 3), ("b", 7)]
        assert all(f.file == "src/index.ts" for f in findings)

    def test_multiline_statement_reports_first_line(self):
        content = "const x = 1;\nimport {\n  x,\n  y,\n} from 'pkg';\n"
        (finding,) = classify(content)
        assert finding.line == 2
        assert finding.statement == "import { x, y, } from 'pkg'"

    def test_one_finding_per_occurrence(self):
        findings = classify("import React from 'react'; import { useState } from 'react';")
        assert [(f.package_name, f.line) for f in findings] == [("react", 1), ("react", 1)]

    def test_source_order_across_kinds(self):
        content = (
            "import type { A } from 'a';\n"
            "import b from 'b';\n"
            "const c = require('c');\n"
        )
        assert _kinds(content) == [("a", TYPE_ONLY), ("b", RUNTIME), ("c", RUNTIME)]


# ── classify_file ──


class TestClassifyFile:
    def test_reads_file(self, tmp_path: Path):
        src = tmp_path / "index.ts"
        src.write_text("import React from 'react';\n")
        (finding,) = classify_file(src)
        assert finding.package_name == "react"
        assert finding.file == str(src)

    def test_missing_file_yields_nothing(self, tmp_path: Path):
        assert classify_file(tmp_path / "missing.ts") == []

    def test_directory_yields_nothing(self, tmp_path: Path):
        assert classify_file(tmp_path) == []

    def test_invalid_utf8_tolerated(self, tmp_path: Path):
        src = tmp_path / "latin1.js"
        src.write_bytes(b"// caf\xe9\nimport x from 'x';\n")
        assert [f.package_name for f in classify_file(src)] == ["x"]
