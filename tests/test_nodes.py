"""Tests for the syntax node helpers."""

from cyclospace.nodes import has_ancestor, kind_in, kind_not_in, node_lines, space_name


class TestHasAncestor:
    """Upward search for a match before a stop."""

    def test_match_found_first(self, make_node):
        leaf = make_node("else", named=False)
        make_node("for_statement", [make_node("else_clause", [leaf])])
        assert has_ancestor(leaf, kind_in("for_statement"), kind_not_in("else_clause"))

    def test_stop_found_first(self, make_node):
        leaf = make_node("else", named=False)
        make_node(
            "for_statement",
            [make_node("if_statement", [make_node("else_clause", [leaf])])],
        )
        assert not has_ancestor(leaf, kind_in("for_statement"), kind_not_in("else_clause"))

    def test_root_reached(self, make_node):
        leaf = make_node("x")
        make_node("module", [make_node("block", [leaf])])
        assert not has_ancestor(leaf, kind_in("for_statement"), kind_in("never"))

    def test_starts_at_parent(self, make_node):
        leaf = make_node("for_statement")
        make_node("module", [leaf])
        assert not has_ancestor(leaf, kind_in("for_statement"), kind_in("never"))

    def test_match_wins_over_stop_on_same_node(self, make_node):
        leaf = make_node("x")
        make_node("both", [leaf])
        assert has_ancestor(leaf, kind_in("both"), kind_in("both"))


class TestSpaceName:
    """Names of space-introducing nodes."""

    def test_name_field(self, make_node):
        ident = make_node("identifier", text="compute")
        fn = make_node("function_definition", [ident], fields={"name": ident})
        assert space_name(fn) == "compute"

    def test_declarator_chain(self, make_node):
        ident = make_node("identifier", text="sumOfPrimes")
        fn_decl = make_node("function_declarator", [ident], fields={"declarator": ident})
        ptr = make_node("pointer_declarator", [fn_decl], fields={"declarator": fn_decl})
        fn = make_node("function_definition", [ptr], fields={"declarator": ptr})
        assert space_name(fn) == "sumOfPrimes"

    def test_type_field_fallback(self, make_node):
        type_node = make_node("type_identifier", text="Matrix")
        impl = make_node("impl_item", [type_node], fields={"type": type_node})
        assert space_name(impl) == "Matrix"

    def test_unnamed(self, make_node):
        assert space_name(make_node("arrow_function")) is None


def test_node_lines_are_one_based(make_node):
    assert node_lines(make_node("block", line=4, end_line=9)) == (5, 10)
