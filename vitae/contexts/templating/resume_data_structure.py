"""
Resume Data Structures

Defines the resume record consumed by the Template Composer. Records are built
from the camelCase JSON shape used by resume templates (personalInfo,
professionalLinks, ...) and are treated as read-only while rendering.
"""

import json
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union


def _text(value: Any) -> str:
    """Coerce a scalar JSON value to template text (None -> "")."""
    if value is None:
        return ""
    return str(value)


def _text_list(raw: Any) -> List[str]:
    """Coerce a JSON list of scalars to text; a bare string is one item."""
    if not raw:
        return []
    if isinstance(raw, str):
        return [raw]
    return [_text(item) for item in raw]


def _entries(raw: Any) -> List[Mapping[str, Any]]:
    """Return list entries that are mappings, treating None as empty."""
    if not raw:
        return []
    return [entry for entry in raw if isinstance(entry, Mapping)]


@dataclass(frozen=True)
class PersonalInfo:
    """
    Scalar identity fields shown in resume headers.

    All fields default to the empty string when absent or null.
    """

    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    initials: str = ""

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "PersonalInfo":
        raw = raw or {}
        return cls(
            name=_text(raw.get("name")),
            title=_text(raw.get("title")),
            email=_text(raw.get("email")),
            phone=_text(raw.get("phone")),
            location=_text(raw.get("location")),
            website=_text(raw.get("website")),
            initials=_text(raw.get("initials")),
        )


@dataclass(frozen=True)
class ProfessionalLink:
    """Icon glyph/text plus URL, rendered as plain text (no anchor)."""

    icon: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ProfessionalLink":
        return cls(icon=_text(raw.get("icon")), url=_text(raw.get("url")))


@dataclass(frozen=True)
class ProjectLink:
    """Project link rendered as an anchor with icon and label."""

    url: str = ""
    icon: str = ""
    label: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ProjectLink":
        return cls(
            url=_text(raw.get("url")),
            icon=_text(raw.get("icon")),
            label=_text(raw.get("label")),
        )


@dataclass(frozen=True)
class ExperienceEntry:
    title: str = ""
    company: str = ""
    date: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ExperienceEntry":
        return cls(
            title=_text(raw.get("title")),
            company=_text(raw.get("company")),
            date=_text(raw.get("date")),
            description=_text(raw.get("description")),
        )


@dataclass(frozen=True)
class ProjectEntry:
    """
    Project entry.

    Attributes:
        tech: Technology tags, rendered only when non-empty
        links: Project links, rendered only when non-empty
    """

    title: str = ""
    date: str = ""
    description: str = ""
    tech: List[str] = field(default_factory=list)
    links: List[ProjectLink] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ProjectEntry":
        return cls(
            title=_text(raw.get("title")),
            date=_text(raw.get("date")),
            description=_text(raw.get("description")),
            tech=_text_list(raw.get("tech")),
            links=[ProjectLink.from_dict(link) for link in _entries(raw.get("links"))],
        )


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    school: str = ""
    date: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "EducationEntry":
        return cls(
            degree=_text(raw.get("degree")),
            school=_text(raw.get("school")),
            date=_text(raw.get("date")),
            description=_text(raw.get("description")),
        )


@dataclass(frozen=True)
class SkillGroup:
    category: str = ""
    items: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "SkillGroup":
        return cls(
            category=_text(raw.get("category")),
            items=_text_list(raw.get("items")),
        )


@dataclass(frozen=True)
class Skills:
    """
    Skills in two independent shapes.

    Attributes:
        grouped: Categorized skills (sidebar layouts)
        flat: Plain skill list (column layouts)
    """

    grouped: List[SkillGroup] = field(default_factory=list)
    flat: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, Any]]) -> "Skills":
        raw = raw or {}
        return cls(
            grouped=[SkillGroup.from_dict(group) for group in _entries(raw.get("grouped"))],
            flat=_text_list(raw.get("flat")),
        )


@dataclass(frozen=True)
class LanguageEntry:
    name: str = ""
    level: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "LanguageEntry":
        return cls(name=_text(raw.get("name")), level=_text(raw.get("level")))


@dataclass(frozen=True)
class CertificationEntry:
    name: str = ""
    issuer: str = ""
    year: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "CertificationEntry":
        return cls(
            name=_text(raw.get("name")),
            issuer=_text(raw.get("issuer")),
            year=_text(raw.get("year")),
        )


@dataclass(frozen=True)
class AchievementEntry:
    title: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "AchievementEntry":
        return cls(title=_text(raw.get("title")), description=_text(raw.get("description")))


@dataclass(frozen=True)
class VolunteerEntry:
    role: str = ""
    organization: str = ""
    date: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "VolunteerEntry":
        return cls(
            role=_text(raw.get("role")),
            organization=_text(raw.get("organization")),
            date=_text(raw.get("date")),
            description=_text(raw.get("description")),
        )


@dataclass(frozen=True)
class ResumeRecord:
    """
    Root resume value object.

    Every list preserves input order. Absent sections are empty lists so that
    the Section Renderer can leave their placeholders untouched.

    Attributes:
        personal_info: Scalar header fields
        summary: Professional summary text
        professional_links: Contact/profile links shown in headers
        experience: Work history entries
        projects: Project entries
        education: Education entries
        skills: Grouped and/or flat skills
        languages: Spoken languages with proficiency
        certifications: Certifications with issuer and year
        achievements: Achievement cards
        volunteer: Volunteer experience entries
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    professional_links: List[ProfessionalLink] = field(default_factory=list)
    experience: List[ExperienceEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: Skills = field(default_factory=Skills)
    languages: List[LanguageEntry] = field(default_factory=list)
    certifications: List[CertificationEntry] = field(default_factory=list)
    achievements: List[AchievementEntry] = field(default_factory=list)
    volunteer: List[VolunteerEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ResumeRecord":
        """
        Build a record from the camelCase JSON shape.

        Args:
            raw: Parsed resume JSON (e.g., {"personalInfo": {...}, "experience": [...]})

        Returns:
            ResumeRecord with defaults for every absent substructure
        """
        return cls(
            personal_info=PersonalInfo.from_dict(raw.get("personalInfo")),
            summary=_text(raw.get("summary")),
            professional_links=[
                ProfessionalLink.from_dict(link) for link in _entries(raw.get("professionalLinks"))
            ],
            experience=[ExperienceEntry.from_dict(e) for e in _entries(raw.get("experience"))],
            projects=[ProjectEntry.from_dict(p) for p in _entries(raw.get("projects"))],
            education=[EducationEntry.from_dict(e) for e in _entries(raw.get("education"))],
            skills=Skills.from_dict(raw.get("skills")),
            languages=[LanguageEntry.from_dict(lang) for lang in _entries(raw.get("languages"))],
            certifications=[
                CertificationEntry.from_dict(c) for c in _entries(raw.get("certifications"))
            ],
            achievements=[AchievementEntry.from_dict(a) for a in _entries(raw.get("achievements"))],
            volunteer=[VolunteerEntry.from_dict(v) for v in _entries(raw.get("volunteer"))],
        )

    @classmethod
    def from_json(cls, text: str) -> "ResumeRecord":
        """
        Parse JSON text into a record.

        Raises:
            json.JSONDecodeError: If text is not JSON
            TypeError: If the JSON document is not an object
        """
        raw = json.loads(text)
        if not isinstance(raw, Mapping):
            raise TypeError(f"Resume JSON must be an object, got {type(raw).__name__}")
        return cls.from_dict(raw)


def coerce_resume(data: Union["ResumeRecord", Mapping[str, Any], str, None]) -> Optional[ResumeRecord]:
    """
    Normalize caller-supplied resume data into a ResumeRecord.

    Accepts an existing record, a parsed JSON mapping, or JSON text. None, and
    JSON text decoding to null, are passed through as None so callers can
    decide how to report absent data.

    Raises:
        json.JSONDecodeError: If text is not JSON
        TypeError: If the data (or decoded JSON) is not an object
    """
    if data is None or isinstance(data, ResumeRecord):
        return data
    if isinstance(data, str):
        data = json.loads(data)
        if data is None:
            return None
    if isinstance(data, Mapping):
        return ResumeRecord.from_dict(data)
    raise TypeError(f"Unsupported resume data type: {type(data).__name__}")
