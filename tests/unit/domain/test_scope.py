"""Unit tests for PathScopeGate (domain/scope.py)."""

import astroid  # type: ignore[import-untyped]
import pytest

from api_dna_linter.domain.scope import PathScopeGate
from api_dna_linter.domain.spans import Span


class TestPathScopeGate:
    @pytest.fixture
    def gate(self) -> PathScopeGate:
        return PathScopeGate(["api/rest"])

    @pytest.mark.parametrize(
        "path",
        [
            "/hyperspot/modules/some_module/api/rest/dto.py",
            "api/rest/dto.py",
            "modules/users/api/rest/v1/dto.py",
            "C:\\work\\users\\api\\rest\\dto.py",
        ],
    )
    def test_within(self, gate: PathScopeGate, path: str) -> None:
        assert gate.is_within(path) is True

    @pytest.mark.parametrize(
        "path",
        [
            "/srv/apiary/rest/dto.py",
            "/srv/api/v1/rest/dto.py",
            "/srv/rest/api/dto.py",
            "/srv/api/rest.py",
            "/srv/myapi/rest/dto.py",
            "/srv/api/restful/dto.py",
            "dto.py",
            "",
            None,
        ],
    )
    def test_not_within(self, gate: PathScopeGate, path: str | None) -> None:
        assert gate.is_within(path) is False

    def test_file_name_is_not_a_directory(self) -> None:
        assert PathScopeGate([("rest",)]).is_within("/srv/api/rest") is False

    def test_tuple_and_string_subtrees(self) -> None:
        gate = PathScopeGate([("api", "rest"), "/graphql/", ""])
        assert gate.subtrees == (("api", "rest"), ("graphql",))
        assert gate.is_within("/srv/graphql/schema.py")

    def test_idempotent_and_order_independent(self, gate: PathScopeGate) -> None:
        paths = ["/a/api/rest/x.py", "/a/other/x.py", "/b/api/rest/y.py"]
        first = [gate.is_within(p) for p in paths]
        second = [gate.is_within(p) for p in reversed(paths)]
        assert first == list(reversed(second)) == [True, False, True]

    def test_span_and_node(self, gate: PathScopeGate) -> None:
        assert gate.is_span_within(Span("/x/api/rest/dto.py", 1, 0, 1, 1))
        assert not gate.is_span_within(Span(None, 1, 0, 1, 1))
        module = astroid.parse("class Dto:\n    pass\n", module_name="dto", path="/x/api/rest/dto.py")
        assert gate.is_node_within(module.body[0])

    def test_unresolvable_node_is_out_of_scope(self, gate: PathScopeGate) -> None:
        module = astroid.parse("class Dto:\n    pass\n")
        assert gate.is_node_within(module.body[0]) is False
