"""Unit tests for ResumeSession and template loading."""

import pytest
from loguru import logger

from vitae.contexts.templating.exceptions import MissingDataError, TemplateLoadError
from vitae.contexts.templating.session import (
    DEFAULT_TEMPLATE_NAMES,
    ResumeSession,
    load_templates,
)

TEMPLATES = {
    "template1": "<div class='resume-container'><h1>{{name}}</h1>{{skillsGrouped}}</div>",
    "template2": "<div class='resume-container'><h2>{{name}}</h2><ul>{{skillsFlat}}</ul></div>",
}


def fake_fetch(name):
    return TEMPLATES[name]


@pytest.fixture
def session():
    return ResumeSession.initialize(fetch=fake_fetch)


@pytest.fixture
def error_messages():
    messages = []
    handler_id = logger.add(messages.append, level="ERROR", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.mark.unit
def test_load_templates_with_custom_fetch():
    """Templates come from the caller-supplied fetch callable."""
    assert load_templates(fetch=fake_fetch) == TEMPLATES


@pytest.mark.unit
def test_load_templates_failure_raises():
    """A failed fetch raises TemplateLoadError with the original error."""

    def broken_fetch(name):
        if name == "template2":
            raise OSError("connection reset")
        return TEMPLATES[name]

    with pytest.raises(TemplateLoadError) as exc_info:
        load_templates(fetch=broken_fetch)

    assert exc_info.value.template_name == "template2"
    assert isinstance(exc_info.value.original_error, OSError)


@pytest.mark.unit
def test_initialize_failure_leaves_no_session():
    """initialize() surfaces load errors instead of returning a partial session."""

    def broken_fetch(name):
        raise OSError("missing")

    with pytest.raises(TemplateLoadError):
        ResumeSession.initialize(fetch=broken_fetch)


@pytest.mark.unit
def test_default_templates_ship_with_package():
    """Both packaged templates load from disk."""
    templates = load_templates()

    assert list(templates) == list(DEFAULT_TEMPLATE_NAMES)
    assert all("resume-container" in html for html in templates.values())


@pytest.mark.unit
def test_generate_html_without_data_raises(session):
    """Rendering before data is set is fatal to that call."""
    with pytest.raises(MissingDataError):
        session.generate_html()


@pytest.mark.unit
def test_generate_html_without_templates_raises():
    """Rendering before templates are loaded is fatal to that call."""
    session = ResumeSession()
    session.set_resume_data({"personalInfo": {"name": "Ann"}})

    with pytest.raises(MissingDataError):
        session.generate_html()


@pytest.mark.unit
def test_generate_html_uses_current_template(session):
    """The default template is template1."""
    session.set_resume_data({"personalInfo": {"name": "Ann"}})

    assert session.current_template == "template1"
    assert "<h1>Ann</h1>" in session.generate_html()


@pytest.mark.unit
def test_set_template_switches(session):
    """Selecting a known template changes the rendered output."""
    session.set_resume_data({"personalInfo": {"name": "Ann"}, "skills": {"flat": ["Go"]}})

    assert session.set_template("template2") is True
    html = session.generate_html()

    assert "<h2>Ann</h2>" in html
    assert '<li class="skill-item">Go</li>' in html


@pytest.mark.unit
def test_set_unknown_template_is_logged_not_raised(session, error_messages):
    """Unknown template names are logged and leave the selection unchanged."""
    assert session.set_template("template9") is False

    assert session.current_template == "template1"
    assert any("template9" in message for message in error_messages)


@pytest.mark.unit
def test_set_resume_data_from_json_text(session):
    """JSON text is parsed into the session's record."""
    session.set_resume_data('{"personalInfo": {"name": "Ann"}}')

    assert session.resume_data.personal_info.name == "Ann"


@pytest.mark.unit
def test_add_custom_template(session):
    """Custom templates can be registered and selected."""
    session.add_template("custom", "<p>{{email}}</p>")
    session.set_resume_data({"personalInfo": {"email": "ann@example.com"}})

    assert session.set_template("custom")
    assert session.generate_html() == "<p>ann@example.com</p>"
    assert session.available_templates() == ["template1", "template2", "custom"]


@pytest.mark.unit
def test_generate_html_recomputed_each_call(session):
    """Output reflects the latest data; nothing is cached."""
    session.set_resume_data({"personalInfo": {"name": "Ann"}})
    first = session.generate_html()
    session.set_resume_data({"personalInfo": {"name": "Bea"}})
    second = session.generate_html()

    assert "Ann" in first
    assert "Bea" in second


@pytest.mark.unit
def test_escaping_session():
    """Sessions created with escape=True escape values."""
    session = ResumeSession.initialize(fetch=fake_fetch, escape=True)
    session.set_resume_data({"personalInfo": {"name": "<Ann>"}})

    assert "&lt;Ann&gt;" in session.generate_html()


@pytest.mark.unit
def test_json_null_data_cannot_render(session):
    """set_resume_data("null") leaves the session without data."""
    session.set_resume_data("null")

    assert session.resume_data is None
    with pytest.raises(MissingDataError):
        session.generate_html()


@pytest.mark.unit
def test_unresolved_placeholders_logged_as_warning(session):
    """Placeholders left in the output are reported at WARNING level."""
    warnings = []
    handler_id = logger.add(warnings.append, level="WARNING", format="{message}")
    try:
        session.add_template("sparse", "<p>{{name}}</p>{{experience}}")
        session.set_template("sparse")
        session.set_resume_data({"personalInfo": {"name": "Ann"}})
        session.generate_html()
    finally:
        logger.remove(handler_id)

    assert any("experience" in message for message in warnings)
