"""
model.py - Record schema for the parliamentarian dataset.

One Record per parliamentarian entry. Records are immutable: every update
(adding an observation, attaching or reviewing an inference) returns a new
Record, so the append-only audit trail in ``data_sources`` cannot be edited
in place.

Module: representantes.model
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Literal, Optional, Tuple

__all__ = [
    'CAMARAS', 'SOURCES', 'FIELDS', 'ESTADOS', 'LEGISLATURES',
    'NORMALIZED_LEVELS', 'SIMPLIFIED_LEVELS', 'SIMPLIFIED_BY_NORMALIZED',
    'PROFESSION_CATEGORIES', 'INFERENCE_RULES', 'NO_DATA_TEXT', 'NO_DATA_LEVEL',
    'DataSourceEntry', 'EducationLevels', 'EducationInference', 'Record',
]

Camara = Literal["Congreso", "Senado"]
Source = Literal["congreso", "senado", "perplexity"]
Field = Literal["estudios", "profesion"]
Estado = Literal["activo", "baja"]
NormalizedLevel = str  # one of NORMALIZED_LEVELS
SimplifiedLevel = str  # one of SIMPLIFIED_LEVELS
InferenceRuleKind = Literal["profession_requires_degree", "occupation_implies_level"]

CAMARAS: Tuple[str, ...] = ("Congreso", "Senado")
SOURCES: Tuple[str, ...] = ("congreso", "senado", "perplexity")
FIELDS: Tuple[str, ...] = ("estudios", "profesion")
ESTADOS: Tuple[str, ...] = ("activo", "baja")
LEGISLATURES: Tuple[str, ...] = ("I", "XV")

NORMALIZED_LEVELS: Tuple[str, ...] = (
    "ESO",
    "Bachillerato",
    "FP_Grado_Medio",
    "FP_Grado_Superior",
    "Grado",
    "Licenciatura",
    "Master",
    "Doctorado",
    "No_consta",
)
SIMPLIFIED_LEVELS: Tuple[str, ...] = ("Obligatoria", "Postobligatoria", "Universitaria")

# No data defaults to the lowest tier
SIMPLIFIED_BY_NORMALIZED: Dict[str, str] = {
    "ESO": "Obligatoria",
    "Bachillerato": "Postobligatoria",
    "FP_Grado_Medio": "Postobligatoria",
    "FP_Grado_Superior": "Postobligatoria",
    "Grado": "Universitaria",
    "Licenciatura": "Universitaria",
    "Master": "Universitaria",
    "Doctorado": "Universitaria",
    "No_consta": "Obligatoria",
}

PROFESSION_CATEGORIES: Tuple[str, ...] = (
    "Manual",
    "Oficina",
    "Funcionario",
    "Profesional_liberal",
    "Empresario",
    "Politica",
    "No_consta",
)
INFERENCE_RULES: Tuple[str, ...] = ("profession_requires_degree", "occupation_implies_level")

NO_DATA_TEXT = "No consta"
NO_DATA_LEVEL = "No_consta"


def _check_choice(name: str, value: Any, choices: Iterable[str]) -> None:
    if value not in choices:
        raise ValueError(f"Invalid {name} {value!r}; expected one of {', '.join(choices)}")


@dataclass(frozen=True)
class DataSourceEntry:
    """
    One observation of a field's raw text.

    Attributes:
        source (Source): Origin of the observation ('congreso', 'senado' or 'perplexity').
        field (Field): Field the observation informs ('estudios' or 'profesion').
        raw_text (str): Text exactly as observed. Never rewritten.
        extracted_at (str): ISO timestamp of the extraction.
        extracted_value (Optional[str]): Pre-normalized value, if the source produced one.
        citations (Tuple[str, ...]): Citation URLs, mostly for researched entries.
    """
    source: Source
    field: Field
    raw_text: str
    extracted_at: str
    extracted_value: Optional[str] = None
    citations: Tuple[str, ...] = ()

    def __post_init__(self):
        _check_choice("source", self.source, SOURCES)
        _check_choice("field", self.field, FIELDS)
        if not isinstance(self.citations, tuple):
            object.__setattr__(self, 'citations', tuple(self.citations or ()))

    @property
    def has_text(self) -> bool:
        return bool(self.raw_text and self.raw_text.strip())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> DataSourceEntry:
        return cls(
            source=data['source'],
            field=data['field'],
            raw_text=data.get('raw_text') or "",
            extracted_at=data.get('extracted_at') or "",
            extracted_value=data.get('extracted_value'),
            citations=tuple(data.get('citations') or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            'source': self.source,
            'field': self.field,
            'raw_text': self.raw_text,
            'extracted_at': self.extracted_at,
        }
        if self.extracted_value is not None:
            out['extracted_value'] = self.extracted_value
        if self.citations:
            out['citations'] = list(self.citations)
        return out


@dataclass(frozen=True)
class EducationLevels:
    """
    Three-level education classification.

    Attributes:
        original (str): Verbatim source text, or "No consta" when there was none.
        normalized (str): One of NORMALIZED_LEVELS.
        simplified (str): One of SIMPLIFIED_LEVELS, always SIMPLIFIED_BY_NORMALIZED[normalized].
    """
    original: str
    normalized: NormalizedLevel
    simplified: SimplifiedLevel

    def __post_init__(self):
        _check_choice("normalized education level", self.normalized, NORMALIZED_LEVELS)
        if SIMPLIFIED_BY_NORMALIZED[self.normalized] != self.simplified:
            raise ValueError(
                f"Simplified level {self.simplified!r} does not match normalized level "
                f"{self.normalized!r} (expected {SIMPLIFIED_BY_NORMALIZED[self.normalized]!r})"
            )

    @classmethod
    def no_data(cls) -> EducationLevels:
        """The canonical "no data" triple."""
        return cls(original=NO_DATA_TEXT, normalized=NO_DATA_LEVEL, simplified=SIMPLIFIED_BY_NORMALIZED[NO_DATA_LEVEL])

    @property
    def is_known(self) -> bool:
        return self.normalized != NO_DATA_LEVEL

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> EducationLevels:
        return cls(original=data['original'], normalized=data['normalized'], simplified=data['simplified'])

    def to_dict(self) -> Dict[str, str]:
        return {'original': self.original, 'normalized': self.normalized, 'simplified': self.simplified}


@dataclass(frozen=True)
class EducationInference:
    """
    Education proposed from profession text, pending human review.

    Attributes:
        inferred_education (str): Proposed education, e.g. 'Licenciado en Derecho'.
        inference_rule (InferenceRuleKind): Kind of rule that produced it.
        confidence (float): Confidence in (0, 1].
        applied (bool): True only after a reviewer approves or modifies it.
        reviewed_by (Optional[str]): Reviewer identity.
        reviewed_at (Optional[str]): ISO timestamp of the review.
        approved (Optional[bool]): None while pending.
    """
    inferred_education: str
    inference_rule: InferenceRuleKind
    confidence: float
    applied: bool = False
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[str] = None
    approved: Optional[bool] = None

    def __post_init__(self):
        _check_choice("inference rule", self.inference_rule, INFERENCE_RULES)
        if not 0.0 < self.confidence <= 1.0:
            raise ValueError(f"Confidence must be in (0, 1], got {self.confidence}")

    @property
    def status(self) -> Literal["pending", "approved", "rejected"]:
        if self.approved is None:
            return "pending"
        return "approved" if self.approved else "rejected"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> EducationInference:
        return cls(
            inferred_education=data['inferred_education'],
            inference_rule=data['inference_rule'],
            confidence=float(data['confidence']),
            applied=bool(data.get('applied', False)),
            reviewed_by=data.get('reviewed_by'),
            reviewed_at=data.get('reviewed_at'),
            approved=data.get('approved'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'inferred_education': self.inferred_education,
            'inference_rule': self.inference_rule,
            'confidence': self.confidence,
            'applied': self.applied,
            'reviewed_by': self.reviewed_by,
            'reviewed_at': self.reviewed_at,
            'approved': self.approved,
        }


@dataclass(frozen=True)
class Record:
    """
    One parliamentarian entry.

    Attributes:
        camara (Camara): Chamber ('Congreso' or 'Senado').
        nombre_completo (str): Full name, "Surname, Given" convention.
        partido (str): Party.
        grupo_parlamentario (str): Parliamentary group.
        circunscripcion (str): Constituency.
        fecha_alta (str): Admission date.
        url_ficha (str): Official profile URL.
        data_sources (Tuple[DataSourceEntry, ...]): Append-only observations.
        education_levels (EducationLevels): Current education classification.
        education_inference (Optional[EducationInference]): Proposal from profession text.
        estado (Optional[Estado]): 'activo', 'baja' or unset (treated as active).
        fecha_baja (Optional[str]): Departure date.
        sustituido_por (Optional[str]): Replacement person.
        last_researched (Optional[str]): Timestamp of the last research pass.
    """
    camara: Camara
    nombre_completo: str
    partido: str
    grupo_parlamentario: str = ""
    circunscripcion: str = ""
    fecha_alta: str = ""
    url_ficha: str = ""
    data_sources: Tuple[DataSourceEntry, ...] = ()
    education_levels: EducationLevels = field(default_factory=EducationLevels.no_data)
    education_inference: Optional[EducationInference] = None
    estado: Optional[Estado] = None
    fecha_baja: Optional[str] = None
    sustituido_por: Optional[str] = None
    last_researched: Optional[str] = None

    def __post_init__(self):
        _check_choice("camara", self.camara, CAMARAS)
        if self.estado is not None:
            _check_choice("estado", self.estado, ESTADOS)
        if not isinstance(self.data_sources, tuple):
            object.__setattr__(self, 'data_sources', tuple(self.data_sources))

    # ---------- observations ----------

    def sources_for(self, field_name: Field) -> Tuple[DataSourceEntry, ...]:
        """All observations for a field, in the order they were added."""
        return tuple(s for s in self.data_sources if s.field == field_name)

    def first_source(self, field_name: Field) -> Optional[DataSourceEntry]:
        for source in self.data_sources:
            if source.field == field_name:
                return source
        return None

    @property
    def profession_source(self) -> Optional[DataSourceEntry]:
        """First profession observation with non-empty text, if any."""
        for source in self.sources_for("profesion"):
            if source.has_text:
                return source
        return None

    @property
    def profession_text(self) -> Optional[str]:
        source = self.profession_source
        return source.raw_text if source else None

    @property
    def profession_category(self) -> str:
        """
        Category of the profession.

        The most recently added profession observation with a known category
        wins; No_consta when there is none.
        """
        for source in reversed(self.sources_for("profesion")):
            if source.extracted_value in PROFESSION_CATEGORIES:
                return source.extracted_value
        return NO_DATA_LEVEL

    @property
    def has_profession(self) -> bool:
        """True if any profession observation carries non-empty text."""
        return any(s.has_text for s in self.sources_for("profesion"))

    @property
    def has_education(self) -> bool:
        return self.education_levels.is_known

    def add_source(self, entry: DataSourceEntry) -> Record:
        """
        Return a copy of this record with one more observation appended.

        Existing entries are carried over untouched.
        """
        return replace(self, data_sources=self.data_sources + (entry,))

    # ---------- lifecycle ----------

    @property
    def is_departed(self) -> bool:
        return self.estado == "baja"

    @property
    def is_active(self) -> bool:
        return self.estado is None or self.estado == "activo"

    @property
    def name_key(self) -> str:
        """Name used for exact duplicate grouping."""
        return self.nombre_completo.strip().lower()

    # ---------- serialization ----------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Record:
        """
        Build a Record from the stored JSON document shape.

        Raises:
            KeyError: If a required identity field is missing.
            ValueError: If an enumerated field has an unknown value.
        """
        levels = data.get('education_levels')
        inference = data.get('education_inference')
        return cls(
            camara=data['camara'],
            nombre_completo=data['nombre_completo'],
            partido=data['partido'],
            grupo_parlamentario=data.get('grupo_parlamentario') or "",
            circunscripcion=data.get('circunscripcion') or "",
            fecha_alta=data.get('fecha_alta') or "",
            url_ficha=data.get('url_ficha') or "",
            data_sources=tuple(DataSourceEntry.from_dict(s) for s in data.get('data_sources') or ()),
            education_levels=EducationLevels.from_dict(levels) if levels else EducationLevels.no_data(),
            education_inference=EducationInference.from_dict(inference) if inference else None,
            estado=data.get('estado'),
            fecha_baja=data.get('fecha_baja'),
            sustituido_por=data.get('sustituido_por'),
            last_researched=data.get('last_researched'),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            'camara': self.camara,
            'nombre_completo': self.nombre_completo,
            'partido': self.partido,
            'grupo_parlamentario': self.grupo_parlamentario,
            'circunscripcion': self.circunscripcion,
            'data_sources': [s.to_dict() for s in self.data_sources],
            'education_levels': self.education_levels.to_dict(),
            'fecha_alta': self.fecha_alta,
            'url_ficha': self.url_ficha,
        }
        # Optional fields are only written when present
        if self.education_inference is not None:
            out['education_inference'] = self.education_inference.to_dict()
        for key in ('estado', 'fecha_baja', 'sustituido_por', 'last_researched'):
            value = getattr(self, key)
            if value:
                out[key] = value
        return out
