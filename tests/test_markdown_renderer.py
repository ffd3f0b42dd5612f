import pytest

from mindmark.exceptions import InvalidFormatError
from mindmark.models import Document, RenderMode, Sheet, Topic
from mindmark.renderers import (
    document_to_markdown,
    resolve_mode,
    sheet_to_markdown,
    topic_to_markdown,
    xmind_to_markdown,
)


def _sheet(root_title, children=(), title=None):
    sheet = {"rootTopic": {"title": root_title,
                           "children": {"attached": [{"title": c} for c in children]}}}
    if title is not None:
        sheet["title"] = title
    return sheet


def test_heading_example(plan_content):
    assert xmind_to_markdown(plan_content, "heading") == "# Root\n\n## A\n\n## B\n\n"


def test_list_example(plan_content):
    assert xmind_to_markdown(plan_content, "list") == "- Root\n  - A\n  - B\n"


def test_mode_defaults_to_heading(plan_content):
    assert xmind_to_markdown(plan_content) == xmind_to_markdown(plan_content, "heading")


def test_heading_levels_and_clamp():
    leaf = Topic(title="t")
    for level in range(1, 7):
        assert topic_to_markdown(leaf, level, "heading") == "#" * level + " t\n\n"
    for level in (7, 8, 20):
        assert topic_to_markdown(leaf, level, "heading") == "###### t\n\n"


def test_list_indentation():
    leaf = Topic(title="t")
    for level in (1, 2, 3, 9):
        assert topic_to_markdown(leaf, level, RenderMode.LIST) == "  " * (level - 1) + "- t\n"


def test_leaf_renders_single_line():
    assert topic_to_markdown(Topic(title="only"), 1, "list") == "- only\n"
    assert topic_to_markdown(Topic(title="only"), 1, "heading") == "# only\n\n"


def test_depth_first_pre_order():
    tree = Topic(title="root", children=[
        Topic(title="a", children=[Topic(title="a1"), Topic(title="a2", children=[Topic(title="a2x")])]),
        Topic(title="b"),
    ])

    assert topic_to_markdown(tree, 1, "list") == (
        "- root\n"
        "  - a\n"
        "    - a1\n"
        "    - a2\n"
        "      - a2x\n"
        "  - b\n"
    )


def test_deep_heading_tree_clamps_every_level_past_six():
    tree = Topic(title="1")
    node = tree
    for level in range(2, 9):
        child = Topic(title=str(level))
        node.children.append(child)
        node = child

    expected = "".join(f"{'#' * min(level, 6)} {level}\n\n" for level in range(1, 9))
    assert topic_to_markdown(tree, 1, "heading") == expected


def test_missing_titles_render_empty():
    content = [{"rootTopic": {"children": {"attached": [{"title": None}, {}]}}}]

    assert xmind_to_markdown(content, "list") == "- \n  - \n  - \n"


def test_single_sheet_title_is_not_emitted():
    content = [_sheet("Root", ["A"], title="Sheet 1")]

    assert xmind_to_markdown(content, "heading") == "# Root\n\n## A\n\n"


def test_multi_sheet_titles_and_separator():
    content = [_sheet("R1", ["A"], title="First"), _sheet("R2", title="Second")]

    assert xmind_to_markdown(content, "heading") == (
        "# First\n\n"
        "## R1\n\n"
        "### A\n\n"
        "\n---\n\n"
        "# Second\n\n"
        "## R2\n\n"
    )


def test_multi_sheet_list_mode():
    content = [_sheet("R1", ["A"], title="First"), _sheet("R2", ["B"])]

    assert xmind_to_markdown(content, "list") == (
        "# First\n\n"
        "  - R1\n"
        "    - A\n"
        "\n---\n\n"
        "- R2\n"
        "  - B\n"
    )


def test_sheets_joined_by_exact_separator():
    s0, s1 = _sheet("X"), _sheet("Y")
    first = sheet_to_markdown(Document.from_payload([s0]).sheets[0], True, "list")
    second = sheet_to_markdown(Document.from_payload([s1]).sheets[0], True, "list")

    assert xmind_to_markdown([s0, s1], "list") == first + "\n---\n\n" + second


def test_single_sheet_has_no_separator(plan_content):
    assert "---" not in xmind_to_markdown(plan_content, "heading")


def test_sheet_without_root_topic():
    content = [{"title": "Empty"}, _sheet("R")]

    assert xmind_to_markdown(content, "list") == "# Empty\n\n\n---\n\n- R\n"
    assert sheet_to_markdown(Sheet(), True, "list") == ""


def test_document_to_markdown_accepts_document(plan_content):
    document = Document.from_payload(plan_content)

    assert document_to_markdown(document, "list") == "- Root\n  - A\n  - B\n"
    assert xmind_to_markdown(document, "list") == "- Root\n  - A\n  - B\n"


def test_empty_document_is_invalid():
    with pytest.raises(InvalidFormatError):
        xmind_to_markdown([], "heading")


def test_non_list_document_is_invalid():
    with pytest.raises(InvalidFormatError):
        xmind_to_markdown({"rootTopic": {"title": "x"}})


@pytest.mark.parametrize("mode", ["", "Heading", "bullets", 3])
def test_unknown_mode_is_rejected(plan_content, mode):
    with pytest.raises(InvalidFormatError):
        xmind_to_markdown(plan_content, mode)


def test_resolve_mode():
    assert resolve_mode() is RenderMode.HEADING
    assert resolve_mode(None) is RenderMode.HEADING
    assert resolve_mode("list") is RenderMode.LIST
    assert resolve_mode(RenderMode.LIST) is RenderMode.LIST


def test_very_deep_tree_renders_without_recursion():
    depth = 5000
    raw = {"title": "n"}
    node = raw
    for _ in range(depth - 1):
        child = {"title": "n"}
        node["children"] = {"attached": [child]}
        node = child

    markdown = xmind_to_markdown([{"rootTopic": raw}], "list")

    lines = markdown.splitlines()
    assert len(lines) == depth
    assert lines[-1] == "  " * (depth - 1) + "- n"
