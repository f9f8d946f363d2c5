"""Unit tests for the Template Composer and field substitution."""

import re

import pytest

from vitae.contexts.templating.composer import (
    find_placeholders,
    render,
    substitute,
    unresolved_placeholders,
)
from vitae.contexts.templating.exceptions import MissingDataError
from vitae.contexts.templating.fields import SCALAR_PLACEHOLDERS, scalar_fields
from vitae.contexts.templating.resume_data_structure import ResumeRecord


@pytest.mark.unit
def test_scalar_fields_cover_personal_info_and_summary():
    """Every scalar placeholder resolves, defaulting to empty."""
    values = scalar_fields(ResumeRecord())

    assert set(values) == set(SCALAR_PLACEHOLDERS)
    assert all(value == "" for value in values.values())


@pytest.mark.unit
def test_every_occurrence_of_name_replaced():
    """All occurrences of a scalar placeholder are replaced."""
    template = "<title>{{name}}</title><h1>{{name}}</h1><footer>{{name}}</footer>"

    html = render(template, {"personalInfo": {"name": "Ann Lee"}})

    assert html.count("Ann Lee") == 3
    assert "{{name}}" not in html


@pytest.mark.unit
def test_absent_scalar_replaced_with_empty_string():
    """Scalar placeholders are substituted even when the field is missing."""
    html = render("<p>{{phone}}</p><p>{{summary}}</p>", {})

    assert html == "<p></p><p></p>"


@pytest.mark.unit
def test_substitution_is_case_sensitive():
    """{{Name}} is not the {{name}} placeholder."""
    html = render("{{Name}} {{name}}", {"personalInfo": {"name": "Ann"}})

    assert html == "{{Name}} Ann"


@pytest.mark.unit
def test_unknown_placeholders_untouched():
    """Placeholders with no resolver are left verbatim."""
    html = render("{{name}} {{favoriteColor}}", {"personalInfo": {"name": "Ann"}})

    assert html == "Ann {{favoriteColor}}"


@pytest.mark.unit
def test_empty_section_placeholder_left_in_place():
    """An empty experience list leaves {{experience}} literally present."""
    template = "<section>{{experience}}</section>"

    html = render(template, {"experience": []})

    assert html == template


@pytest.mark.unit
def test_flat_skills_only():
    """Flat-only skills replace {{skillsFlat}} and leave {{skillsGrouped}}."""
    template = "<div>{{skillsGrouped}}</div><ul>{{skillsFlat}}</ul>"

    html = render(template, {"skills": {"flat": ["Python", "Go", "SQL"]}})

    assert "{{skillsGrouped}}" in html
    assert "{{skillsFlat}}" not in html
    assert re.findall(r'<li class="skill-item">(.*?)</li>', html) == ["Python", "Go", "SQL"]


@pytest.mark.unit
def test_grouped_skills_only():
    """Grouped-only skills replace {{skillsGrouped}} and leave {{skillsFlat}}."""
    template = "<div>{{skillsGrouped}}</div><ul>{{skillsFlat}}</ul>"

    html = render(
        template, {"skills": {"grouped": [{"category": "Cloud", "items": ["AWS", "GCP"]}]}}
    )

    assert "{{skillsFlat}}" in html
    assert "{{skillsGrouped}}" not in html
    assert '<h4 class="skill-group-title">Cloud</h4>' in html


@pytest.mark.unit
def test_render_is_idempotent():
    """Rendering the same template and data twice is byte-identical."""
    template = "{{name}}|{{experience}}|{{projects}}|{{skillsFlat}}"
    data = {
        "personalInfo": {"name": "Ann Lee"},
        "experience": [{"title": "Eng", "company": "Acme"}],
        "projects": [{"title": "Tool", "tech": ["Go"]}],
        "skills": {"flat": ["Go"]},
    }

    assert render(template, data) == render(template, data)


@pytest.mark.unit
def test_values_are_not_rescanned():
    """A value containing a placeholder is inserted literally (single pass)."""
    html = render(
        "{{name}} / {{email}}",
        {"personalInfo": {"name": "{{email}}", "email": "ann@example.com"}},
    )

    assert html == "{{email}} / ann@example.com"


@pytest.mark.unit
def test_render_without_data_raises():
    """None data is the only fatal input."""
    with pytest.raises(MissingDataError):
        render("{{name}}", None)


@pytest.mark.unit
def test_render_accepts_json_text():
    """JSON text is accepted as resume data."""
    assert render("{{name}}", '{"personalInfo": {"name": "Ann"}}') == "Ann"


@pytest.mark.unit
def test_no_escaping_by_default():
    """Values are inserted verbatim unless escaping is requested."""
    html = render("{{summary}}", {"summary": "<b>Bold</b>"})

    assert html == "<b>Bold</b>"


@pytest.mark.unit
def test_escape_option():
    """escape=True escapes scalar fields and section fragments."""
    html = render(
        "{{summary}} {{experience}}",
        {"summary": "<b>Bold</b>", "experience": [{"title": "<i>Eng</i>"}]},
        escape=True,
    )

    assert "&lt;b&gt;Bold&lt;/b&gt;" in html
    assert "&lt;i&gt;Eng&lt;/i&gt;" in html
    assert "<b>" not in html


@pytest.mark.unit
def test_end_to_end_single_experience():
    """Name appears once and the experience fragment carries every field."""
    template = "<h1>{{name}}</h1>\n<section>{{experience}}</section>"
    data = {
        "personalInfo": {"name": "Ann Lee"},
        "experience": [
            {
                "title": "Eng",
                "company": "Acme",
                "date": "2020-2021",
                "description": "Built things",
            }
        ],
    }

    html = render(template, data)

    assert html.count("Ann Lee") == 1
    assert html.count('class="experience-item"') == 1
    # Fragment shape: title, date, company, description
    positions = [html.index(value) for value in ("Eng", "2020-2021", "Acme", "Built things")]
    assert positions == sorted(positions)
    assert unresolved_placeholders(html) == []


@pytest.mark.unit
def test_substitute_leaves_unmapped_tokens():
    """substitute() only touches names present in the map."""
    assert substitute("{{a}}{{b}}{{a}}", {"a": "1"}) == "1{{b}}1"


@pytest.mark.unit
def test_find_placeholders_distinct_in_order():
    """find_placeholders() lists each name once, by first appearance."""
    assert find_placeholders("{{b}} {{a}} {{b}} {{ c }}") == ["b", "a"]


@pytest.mark.unit
def test_json_null_is_absent_data():
    """JSON text decoding to null is treated like None."""
    with pytest.raises(MissingDataError):
        render("{{name}}", "null")


@pytest.mark.unit
@pytest.mark.parametrize("text", ["[]", '"Ann"', "42"])
def test_json_non_object_rejected(text):
    """JSON documents that are not objects raise TypeError, not AttributeError."""
    with pytest.raises(TypeError):
        render("{{name}}", text)
