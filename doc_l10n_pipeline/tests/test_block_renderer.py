import pytest

from conftest import make_block
from doc_l10n.block_renderer import h, nest_lists, render_blocks
from doc_l10n.errors import UnknownTypeError
from doc_l10n.profiles import get_profile
from doc_l10n.serializer_table import SerializerTable


def test_h_builds_element_and_skips_empty_attrs():
    assert h("div", {"className": "title", "id": None}, "x") == '<div class="title">x</div>'


def test_h_inner_html_wins_over_children():
    assert h("div", {"innerHTML": "<b>raw</b>"}, "ignored") == "<div><b>raw</b></div>"


def test_h_escapes_attribute_values():
    assert h("div", {"className": 'a"b'}) == '<div class="a&quot;b"></div>'


def test_plain_block_renders_paragraph():
    assert render_blocks([make_block("b1", "Hello")]) == "<p>Hello</p>"


def test_heading_and_blockquote_styles():
    out = render_blocks([make_block("h", "Title", style="h2"), make_block("q", "Quote", style="blockquote")])
    assert out == "<h2>Title</h2><blockquote>Quote</blockquote>"


def test_span_text_is_escaped():
    assert render_blocks([make_block("b", "a < b & c")]) == "<p>a &lt; b &amp; c</p>"


def test_newlines_become_line_breaks():
    assert render_blocks([make_block("b", "one\ntwo")]) == "<p>one<br/>two</p>"


def test_marks_and_link_annotations():
    block = {
        "_type": "block",
        "_key": "b1",
        "style": "normal",
        "markDefs": [{"_key": "l1", "_type": "link", "href": "https://example.com"}],
        "children": [
            {"_type": "span", "text": "Hi ", "marks": []},
            {"_type": "span", "text": "there", "marks": ["strong", "l1"]},
            {"_type": "span", "text": "!", "marks": ["unknown-mark"]},
        ],
    }
    assert render_blocks([block]) == '<p>Hi <strong><a href="https://example.com">there</a></strong>!</p>'


def test_consecutive_list_items_are_grouped():
    blocks = [
        make_block("a", "One", listItem="bullet", level=1),
        make_block("b", "Two", listItem="bullet", level=1),
        make_block("c", "Three", listItem="number", level=1),
        make_block("d", "After"),
    ]
    out = render_blocks(blocks)
    assert out == "<ul><li>One</li><li>Two</li></ul><ol><li>Three</li></ol><p>After</p>"


def test_deeper_levels_nest_inside_previous_item():
    blocks = [
        make_block("a", "A", listItem="bullet", level=1),
        make_block("b", "B", listItem="bullet", level=2),
        make_block("c", "C", listItem="bullet", level=1),
    ]
    assert render_blocks(blocks) == "<ul><li>A<ul><li>B</li></ul></li><li>C</li></ul>"


def test_nest_lists_passes_other_nodes_through():
    node = {"_type": "image"}
    tree = nest_lists([node, make_block("a", "A", listItem="bullet")])
    assert tree[0] is node
    assert len(tree) == 2


def test_custom_type_renderer_is_used():
    table = SerializerTable(types={"callout": lambda node, children: f"<aside>{node['text']}</aside>"})
    assert render_blocks([{"_type": "callout", "text": "Hi"}], table) == "<aside>Hi</aside>"


def test_unknown_type_raises_without_fallback():
    with pytest.raises(UnknownTypeError) as exc:
        render_blocks([{"_type": "mystery"}])
    assert exc.value.type_name == "mystery"


def test_unknown_type_fallback():
    table = SerializerTable(unknown_type=lambda node, children: "<div></div>")
    assert render_blocks([{"_type": "mystery"}], table) == "<div></div>"


def test_bare_span_renders_its_text():
    assert render_blocks([{"_type": "span", "text": "x & y", "marks": ["em"]}]) == "<em>x &amp; y</em>"


def test_default_profile_keeps_keys_as_ids():
    table = get_profile("default").table
    blocks = [
        make_block("h", "Title", style="h1"),
        make_block("p", "Body"),
        make_block("li1", "Item", listItem="bullet", level=1),
    ]
    out = render_blocks(blocks, table)
    assert out == '<h1 id="h">Title</h1><p id="p">Body</p><ul id="li1"><li id="li1">Item</li></ul>'


def test_default_profile_styled_list_item_goes_through_block_renderer():
    table = get_profile("default").table
    out = render_blocks([make_block("x", "Big", style="h3", listItem="number", level=1)], table)
    assert out == '<ol id="x"><li id="x"><h3 id="x">Big</h3></li></ol>'


def test_default_profile_unknown_type_renders_empty_div():
    table = get_profile("default").table
    assert render_blocks([{"_type": "mystery"}], table) == '<div class="mystery"></div>'


def test_plain_profile_uses_builtins():
    table = get_profile("plain").table
    assert render_blocks([make_block("p", "Body")], table) == "<p>Body</p>"
    with pytest.raises(UnknownTypeError):
        render_blocks([{"_type": "mystery"}], table)


def test_unknown_profile():
    with pytest.raises(KeyError):
        get_profile("nope")
