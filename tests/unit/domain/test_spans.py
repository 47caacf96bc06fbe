"""Unit tests for Span (domain/spans.py)."""

import astroid  # type: ignore[import-untyped]

from api_dna_linter.domain.spans import Span


class TestSpan:
    def test_of_node_uses_module_file(self) -> None:
        module = astroid.parse("value = compute(1)\n", module_name="m", path="/srv/api/rest/m.py")
        call = next(module.nodes_of_class(astroid.nodes.Call))
        span = Span.of(call)
        assert span.file == "/srv/api/rest/m.py"
        assert (span.lineno, span.col_offset, span.end_lineno, span.end_col_offset) == (1, 8, 1, 18)

    def test_file_of_unknown_module_is_none(self) -> None:
        module = astroid.parse("x = 1\n")
        assert Span.file_of(module.body[0]) is None

    def test_attribute_name_span_covers_only_the_name(self) -> None:
        source = "builder.summary('x').register(router)\n"
        module = astroid.parse(source, module_name="m", path="m.py")
        outer = module.body[0].value
        span = Span.of_attribute_name(outer.func)
        assert span.text_in(source) == "register"

    def test_attribute_name_span_on_continuation_line(self) -> None:
        source = "route = (\n    builder\n    .register(router)\n)\n"
        module = astroid.parse(source, module_name="m", path="m.py")
        call = next(module.nodes_of_class(astroid.nodes.Call))
        span = Span.of_attribute_name(call.func)
        assert span.lineno == 3
        assert span.text_in(source) == "register"

    def test_text_in_uses_byte_offsets(self) -> None:
        source = "label = 'é'; route.register(router)\n"
        module = astroid.parse(source, module_name="m", path="m.py")
        call = next(module.nodes_of_class(astroid.nodes.Call))
        assert Span.of_attribute_name(call.func).text_in(source) == "register"

    def test_text_in_multiline(self) -> None:
        span = Span(None, 1, 4, 2, 3)
        assert span.text_in("abc def\nghi jkl\n") == "def\nghi"

    def test_text_in_out_of_range_is_empty(self) -> None:
        assert Span(None, 5, 0, 5, 1).text_in("one line\n") == ""

    def test_to_dict_and_str(self) -> None:
        span = Span("f.py", 2, 4, 2, 12)
        assert span.to_dict() == {
            "file": "f.py",
            "start": {"line": 2, "col": 4},
            "end": {"line": 2, "col": 12},
        }
        assert str(span) == "f.py:2:4"
        assert str(Span(None, 1, 0, 1, 1)) == "<unknown>:1:0"
