"""Tests for DOMQuery resolution."""

import pytest

from fractal_page_object import (
    DocumentFragment,
    DOMQuery,
    SelectorArray,
    ShadowRoot,
    set_body_html,
)

MARKUP = """
  <div>
    <span>
      <strong></strong>
      <strong></strong>
    </span>
    <span>
      <strong></strong>
    </span>
    <strong></strong>
  </div>
  <span>
    <strong></strong>
  </span>
  <span>
    <strong></strong>
  </span>
  <strong></strong>
"""


@pytest.fixture
def dom():
    """Render the fixture markup and name its interesting elements."""
    body = set_body_html(MARKUP)
    root = body.find("div")
    span1, span2, strong4 = list(root)
    strong1, strong2 = list(span1)
    (strong3,) = list(span2)
    return {
        "root": root,
        "span1": span1,
        "span2": span2,
        "strong1": strong1,
        "strong2": strong2,
        "strong3": strong3,
        "strong4": strong4,
        "query": DOMQuery(root),
    }


def check(query, expected_str, expected_all):
    assert str(query.selector_array) == expected_str
    first = query.query()
    if expected_all:
        assert first is expected_all[0]
    else:
        assert first is None
    result = query.query_all()
    assert len(result) == len(expected_all)
    assert all(a is b for a, b in zip(result, expected_all))


class TestNullRoot:
    """Tests for queries without a root."""

    def test_never_matches(self):
        """Test a null root never matches."""
        query = DOMQuery(None)
        assert query.query() is None
        assert query.query_all() == []

        for selector, index in [("div", None), ("span", None), ("span", 0), ("", 0)]:
            child = query.create_child(selector, index)
            assert child.query() is None
            assert child.query_all() == []


class TestOnlyMatchesInRoot:
    """Tests that results are restricted to descendants of the root."""

    def test_spans(self, dom):
        """Test span matches only come from inside the root."""
        q = dom["query"]
        check(q.create_child("span"), "span", [dom["span1"], dom["span2"]])
        check(q.create_child("span", 0), "span[0]", [dom["span1"]])
        check(q.create_child("span", 1), "span[1]", [dom["span2"]])
        check(q.create_child("span", 2), "span[2]", [])

    def test_strongs(self, dom):
        """Test strong matches come in document order."""
        q = dom["query"]
        strongs = [dom["strong1"], dom["strong2"], dom["strong3"], dom["strong4"]]
        check(q.create_child("strong"), "strong", strongs)
        for i, strong in enumerate(strongs):
            check(q.create_child("strong", i), f"strong[{i}]", [strong])
        check(q.create_child("strong", 4), "strong[4]", [])


class TestRoot:
    """Tests for the bare root and index-only fragments."""

    def test_root(self, dom):
        """Test an empty path matches the root."""
        check(dom["query"], "", [dom["root"]])

    def test_root_index(self, dom):
        """Test index 0 matches the root, other indices nothing."""
        q = dom["query"]
        check(q.create_child("", 0), "[0]", [dom["root"]])
        check(q.create_child("", 1), "[1]", [])
        check(q.create_child("", 2), "[2]", [])

    def test_root_index_index(self, dom):
        """Test only [0][0] keeps matching the root."""
        q = dom["query"]
        check(q.create_child("", 0).create_child("", 0), "[0][0]", [dom["root"]])
        check(q.create_child("", 0).create_child("", 1), "[0][1]", [])
        check(q.create_child("", 1).create_child("", 0), "[1][0]", [])
        check(q.create_child("", 1).create_child("", 1), "[1][1]", [])

    def test_negative_index(self, dom):
        """Test negative indices never match."""
        q = dom["query"]
        check(q.create_child("span", -1), "span[-1]", [])
        check(q.create_child("", -1), "[-1]", [])


class TestSelectors:
    """Tests for selector and index combinations."""

    def test_selector(self, dom):
        """Test root + selector."""
        q = dom["query"]
        check(q.create_child("span"), "span", [dom["span1"], dom["span2"]])
        check(q.create_child("section"), "section", [])

    def test_selector_index(self, dom):
        """Test root + selector + index."""
        q = dom["query"]
        check(q.create_child("span", 0), "span[0]", [dom["span1"]])
        check(q.create_child("span", 1), "span[1]", [dom["span2"]])
        check(q.create_child("span", 2), "span[2]", [])
        check(q.create_child("section", 0), "section[0]", [])

    def test_selector_selector(self, dom):
        """Test root + selector + selector."""
        q = dom["query"]
        check(
            q.create_child("span").create_child("strong"),
            "span strong",
            [dom["strong1"], dom["strong2"], dom["strong3"]],
        )
        check(q.create_child("span").create_child("section"), "span section", [])
        check(q.create_child("section").create_child("strong"), "section strong", [])

    def test_selector_index_selector(self, dom):
        """Test root + selector + index + selector."""
        q = dom["query"]
        check(
            q.create_child("span", 0).create_child("strong"),
            "span[0] strong",
            [dom["strong1"], dom["strong2"]],
        )
        check(q.create_child("span", 1).create_child("strong"), "span[1] strong", [dom["strong3"]])
        check(q.create_child("span", 2).create_child("strong"), "span[2] strong", [])
        check(q.create_child("span", 0).create_child("section"), "span[0] section", [])
        check(q.create_child("span", 2).create_child("section"), "span[2] section", [])
        check(q.create_child("section", 0).create_child("strong"), "section[0] strong", [])

    def test_selector_selector_index(self, dom):
        """Test root + selector + selector + index."""
        q = dom["query"]
        check(q.create_child("span").create_child("strong", 0), "span strong[0]", [dom["strong1"]])
        check(q.create_child("span").create_child("strong", 1), "span strong[1]", [dom["strong2"]])
        check(q.create_child("span").create_child("strong", 2), "span strong[2]", [dom["strong3"]])
        check(q.create_child("span").create_child("strong", 3), "span strong[3]", [])
        check(q.create_child("span").create_child("section", 0), "span section[0]", [])
        check(q.create_child("section").create_child("strong", 0), "section strong[0]", [])

    def test_selector_index_selector_index(self, dom):
        """Test root + selector + index + selector + index."""
        q = dom["query"]
        check(q.create_child("span", 0).create_child("strong", 0), "span[0] strong[0]", [dom["strong1"]])
        check(q.create_child("span", 0).create_child("strong", 1), "span[0] strong[1]", [dom["strong2"]])
        check(q.create_child("span", 1).create_child("strong", 0), "span[1] strong[0]", [dom["strong3"]])
        check(q.create_child("span", 0).create_child("strong", 2), "span[0] strong[2]", [])
        check(q.create_child("span", 1).create_child("strong", 1), "span[1] strong[1]", [])
        check(q.create_child("span", 0).create_child("section", 0), "span[0] section[0]", [])
        check(q.create_child("span", 2).create_child("strong", 0), "span[2] strong[0]", [])
        check(q.create_child("section", 0).create_child("strong", 0), "section[0] strong[0]", [])

    def test_selector_index_index(self, dom):
        """Test root + selector + index + index."""
        q = dom["query"]
        check(q.create_child("span", 0).create_child("", 0), "span[0][0]", [dom["span1"]])
        check(q.create_child("span", 1).create_child("", 0), "span[1][0]", [dom["span2"]])
        check(q.create_child("span", 0).create_child("", 1), "span[0][1]", [])
        check(q.create_child("span", 2).create_child("", 0), "span[2][0]", [])
        check(q.create_child("span", 2).create_child("", 1), "span[2][1]", [])
        for index, child_index in [(0, 0), (0, 1), (1, 0), (1, 1)]:
            check(
                q.create_child("section", index).create_child("", child_index),
                f"section[{index}][{child_index}]",
                [],
            )


class TestLiveness:
    """Tests that queries always observe the current tree."""

    def test_mutation_between_calls(self, dom):
        """Test a query sees elements added after it was created."""
        child = dom["query"].create_child("em")
        assert child.query() is None
        dom["span2"].append(dom["span2"].makeelement("em", {}))
        assert child.query() is not None


class TestFragments:
    """Tests for fragment and shadow root anchors."""

    def test_fragment_never_matches_itself(self):
        """Test a fragment root matches its descendants but not itself."""
        fragment = DocumentFragment.from_html("<li>one</li><li>two</li>")
        query = DOMQuery(fragment)
        assert query.query() is None
        assert query.query_all() == []
        assert query.create_child("", 0).query() is None
        assert query.create_child("", 0).query_all() == []

        items = query.create_child("li").query_all()
        assert [item.text for item in items] == ["one", "two"]
        assert query.create_child("li", 1).query().text == "two"

    def test_shadow_root_is_isolated(self):
        """Test a shadow root is invisible from the host's tree."""
        body = set_body_html('<div id="host"></div><p>light</p>')
        host = body.find("div")
        shadow = ShadowRoot.attach(host, "<p>shadow</p>")

        assert DOMQuery(host).create_child("p").query() is None
        assert DOMQuery(shadow).create_child("p").query().text == "shadow"
        assert [p.text for p in DOMQuery(body).create_child("p").query_all()] == ["light"]

    def test_leading_combinator(self, dom):
        """Test a selector starting with a combinator is scoped to the root."""
        children = dom["query"].create_child("> strong").query_all()
        assert len(children) == 1
        assert children[0] is dom["strong4"]


class TestSelectorArrayQueries:
    """Tests for queries built from selector arrays directly."""

    def test_span_index_strong(self, dom):
        """Test span[1] strong queries strongs inside the second span only."""
        path = SelectorArray().extend("span").extend(1).extend("strong")
        query = DOMQuery(dom["root"], path)
        check(query, "span[1] strong", [dom["strong3"]])

    def test_first_is_first_of_all(self, dom):
        """Test query() is always the first result of query_all()."""
        q = dom["query"]
        for child in (
            q.create_child("strong"),
            q.create_child("span", 1).create_child("strong"),
            q.create_child("section"),
            q.create_child("", 1),
        ):
            results = child.query_all()
            assert child.query() is (results[0] if results else None)
