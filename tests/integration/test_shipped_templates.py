"""
Integration tests for the packaged templates rendered with the sample resume.
"""

import json
from pathlib import Path

import pytest

from vitae.contexts.templating import ResumeSession, unresolved_placeholders, validate_resume_data

SAMPLE_RESUME = Path(__file__).parents[2] / "data" / "sample_resume.json"


@pytest.fixture(scope="module")
def sample_data():
    return json.loads(SAMPLE_RESUME.read_text(encoding="utf-8"))


@pytest.fixture
def session(sample_data):
    session = ResumeSession.initialize()
    session.set_resume_data(sample_data)
    return session


@pytest.mark.integration
def test_sample_resume_is_valid(sample_data):
    assert validate_resume_data(sample_data)


@pytest.mark.integration
@pytest.mark.parametrize(
    "template_name, skills_placeholder",
    [("template1", "skillsGrouped"), ("template2", "skillsFlat")],
)
def test_template_fully_resolved(session, template_name, skills_placeholder):
    """Every placeholder in a packaged template is filled by the sample resume."""
    assert session.set_template(template_name)

    html = session.generate_html()

    assert unresolved_placeholders(html) == []
    assert html.count("John Doe") == 2
    assert 'class="resume-container' in html
    assert "{{" + skills_placeholder + "}}" not in html


@pytest.mark.integration
def test_template1_sections(session):
    """Sidebar template renders grouped skills and every list section."""
    html = session.generate_html()

    assert html.count('class="experience-item"') == 2
    assert '<span class="tech-tag">Playwright</span>' in html
    assert '<div class="cert-issuer">Amazon (2022)</div>' in html
    assert '<h4 class="skill-group-title">' in html
    assert "<span>linkedin.com/in/johndoe</span>" in html


@pytest.mark.integration
def test_template2_uses_flat_skills(session):
    assert session.set_template("template2")

    html = session.generate_html()

    assert '<li class="skill-item">PostgreSQL</li>' in html
    assert 'class="skill-group-title"' not in html


@pytest.mark.integration
def test_rendering_twice_is_identical(session):
    assert session.generate_html() == session.generate_html()
