"""Wire models for the Model Derivative service."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import Field, SerializeAsAny

from ..model import CamelModel


class Region(str, Enum):
    """Data center that holds the derivatives of a design."""

    US = "US"
    EMEA = "EMEA"
    AUS = "AUS"
    CAN = "CAN"
    DEU = "DEU"
    IND = "IND"
    JPN = "JPN"
    GBR = "GBR"


class XAdsDerivativeFormat(str, Enum):
    LATEST = "latest"
    FALLBACK = "fallback"


class OutputType(str, Enum):
    SVF = "svf"
    SVF2 = "svf2"
    THUMBNAIL = "thumbnail"
    STL = "stl"
    STEP = "step"
    IGES = "iges"
    OBJ = "obj"
    DWG = "dwg"
    IFC = "ifc"


class View(str, Enum):
    TWO_D = "2d"
    THREE_D = "3d"


# Job payload


class JobPayloadInput(CamelModel):
    urn: str
    compressed_urn: bool | None = None
    root_filename: str | None = None
    check_references: bool | None = None


class JobPayloadOutputDestination(CamelModel):
    region: Region | None = None


class JobSvf2OutputFormatAdvanced(CamelModel):
    """Source-format specific options of an SVF/SVF2 translation."""


class JobSvf2OutputFormatAdvancedNWD(JobSvf2OutputFormatAdvanced):
    hidden_objects: bool | None = None
    basic_material_properties: bool | None = None
    autodesk_material_properties: bool | None = None
    timeliner_properties: bool | None = None


class JobSvf2OutputFormatAdvancedRVT(JobSvf2OutputFormatAdvanced):
    generate_master_views: bool | None = None
    material_mode: Literal["auto", "basic", "autodesk"] | None = None
    hidden_objects: bool | None = None
    basic_material_properties: bool | None = None
    autodesk_material_properties: bool | None = None


class JobSvf2OutputFormatAdvancedIFC(JobSvf2OutputFormatAdvanced):
    conversion_method: Literal["legacy", "classic", "modern", "v3"] | None = None
    building_storeys: Literal["hide", "show", "skip"] | None = None
    spaces: Literal["hide", "show", "skip"] | None = None
    opening_elements: Literal["hide", "show", "skip"] | None = None


JobSvfOutputFormatAdvanced = JobSvf2OutputFormatAdvanced
JobSvfOutputFormatAdvancedNWD = JobSvf2OutputFormatAdvancedNWD
JobSvfOutputFormatAdvancedRVT = JobSvf2OutputFormatAdvancedRVT
JobSvfOutputFormatAdvancedIFC = JobSvf2OutputFormatAdvancedIFC


class JobPayloadFormatSVF(CamelModel):
    type: Literal["svf"] = "svf"
    views: list[View] = Field(default_factory=lambda: [View.TWO_D, View.THREE_D])
    advanced: SerializeAsAny[JobSvf2OutputFormatAdvanced] | None = None


class JobPayloadFormatSVF2(CamelModel):
    type: Literal["svf2"] = "svf2"
    views: list[View] = Field(default_factory=lambda: [View.TWO_D, View.THREE_D])
    advanced: SerializeAsAny[JobSvf2OutputFormatAdvanced] | None = None


class JobThumbnailOutputFormatAdvanced(CamelModel):
    width: Literal[100, 200, 400] | None = None
    height: Literal[100, 200, 400] | None = None


class JobPayloadFormatThumbnail(CamelModel):
    type: Literal["thumbnail"] = "thumbnail"
    advanced: JobThumbnailOutputFormatAdvanced | None = None


class JobStlOutputFormatAdvanced(CamelModel):
    format: Literal["binary", "ascii"] | None = None
    export_color: bool | None = None
    export_file_structure: Literal["single", "multiple"] | None = None


class JobPayloadFormatSTL(CamelModel):
    type: Literal["stl"] = "stl"
    advanced: JobStlOutputFormatAdvanced | None = None


class JobStepOutputFormatAdvanced(CamelModel):
    application_protocol: Literal["203", "214", "242"] | None = None
    tolerance: float | None = None


class JobPayloadFormatSTEP(CamelModel):
    type: Literal["step"] = "step"
    advanced: JobStepOutputFormatAdvanced | None = None


class JobIgesOutputFormatAdvanced(CamelModel):
    tolerance: float | None = None
    surface_type: Literal["bounded", "trimmed", "wireframe"] | None = None
    sheet_type: Literal["open", "shell", "surface", "wireframe"] | None = None
    solid_type: Literal["solid", "shell", "surface", "wireframe"] | None = None


class JobPayloadFormatIGES(CamelModel):
    type: Literal["iges"] = "iges"
    advanced: JobIgesOutputFormatAdvanced | None = None


class JobObjOutputFormatAdvanced(CamelModel):
    export_file_structure: Literal["single", "multiple"] | None = None
    unit: str | None = None
    model_guid: str | None = None
    object_ids: list[int] | None = None


class JobPayloadFormatOBJ(CamelModel):
    type: Literal["obj"] = "obj"
    advanced: JobObjOutputFormatAdvanced | None = None


class JobDwgOutputFormatAdvanced(CamelModel):
    export_setting_name: str | None = None


class JobPayloadFormatDWG(CamelModel):
    type: Literal["dwg"] = "dwg"
    advanced: JobDwgOutputFormatAdvanced | None = None


class JobIfcOutputFormatAdvanced(CamelModel):
    export_setting_name: str | None = None


class JobPayloadFormatIFC(CamelModel):
    type: Literal["ifc"] = "ifc"
    advanced: JobIfcOutputFormatAdvanced | None = None


JobPayloadFormat = Annotated[
    JobPayloadFormatSVF
    | JobPayloadFormatSVF2
    | JobPayloadFormatThumbnail
    | JobPayloadFormatSTL
    | JobPayloadFormatSTEP
    | JobPayloadFormatIGES
    | JobPayloadFormatOBJ
    | JobPayloadFormatDWG
    | JobPayloadFormatIFC,
    Field(discriminator="type"),
]


class JobPayloadOutput(CamelModel):
    destination: JobPayloadOutputDestination | None = None
    formats: list[JobPayloadFormat]


class JobPayloadMisc(CamelModel):
    workflow: str | None = None
    workflow_attribute: dict[str, Any] | None = None


class JobPayload(CamelModel):
    """Body of ``POST /designdata/job``: what to translate and into which formats."""

    input: JobPayloadInput
    output: JobPayloadOutput
    misc: JobPayloadMisc | None = None


class JobAcceptedJobs(CamelModel):
    output: dict[str, Any] | None = None


class Job(CamelModel):
    result: str | None = None
    urn: str | None = None
    accepted_jobs: JobAcceptedJobs | None = None


# References


class SpecifyReferencesPayloadReferences(CamelModel):
    urn: str
    relative_path: str | None = None
    filename: str | None = None
    metadata: dict[str, Any] | None = None
    references: list[SpecifyReferencesPayloadReferences] | None = None


class SpecifyReferencesPayload(CamelModel):
    urn: str | None = None
    filename: str | None = None
    references: list[SpecifyReferencesPayloadReferences] = Field(default_factory=list)


class SpecifyReferences(CamelModel):
    result: str | None = None


# Manifest


class ManifestResources(CamelModel):
    guid: str | None = None
    type: str | None = None
    role: str | None = None
    name: str | None = None
    status: str | None = None
    progress: str | None = None
    mime: str | None = None
    urn: str | None = None
    has_thumbnail: str | None = None
    resolution: list[float] | None = None
    model_guid: str | None = None
    object_ids: list[int] | None = None
    viewable_id: str | None = Field(None, alias="viewableID")
    phase_names: Any = None
    children: list[ManifestResources] | None = None


class ManifestDerivative(CamelModel):
    name: str | None = None
    has_thumbnail: str | None = None
    status: str | None = None
    progress: str | None = None
    output_type: str | None = None
    children: list[ManifestResources] | None = None
    messages: list[dict[str, Any]] | None = None


class Manifest(CamelModel):
    """Translation status of a design and the derivatives produced so far."""

    type: str | None = None
    has_thumbnail: str | None = None
    status: str | None = None
    progress: str | None = None
    region: str | None = None
    urn: str | None = None
    version: str | None = None
    derivatives: list[ManifestDerivative] = Field(default_factory=list)


class DeleteManifest(CamelModel):
    result: str | None = None


# Derivatives


class DerivativeDownload(CamelModel):
    """Signed download location of a derivative.

    ``signed_cookies`` holds the ``Set-Cookie`` values that must accompany the
    ``GET`` on ``url``; it is filled from the response headers and never sent.
    """

    etag: str | None = None
    size: int | None = None
    url: str | None = None
    content_type: str | None = Field(None, alias="content-type")
    expiration: int | None = None
    signed_cookies: list[str] = Field(default_factory=list, exclude=True)


# Metadata


class ModelViewsDataMetadata(CamelModel):
    name: str | None = None
    role: str | None = None
    guid: str | None = None
    is_master_view: bool | None = None


class ModelViewsData(CamelModel):
    type: str | None = None
    metadata: list[ModelViewsDataMetadata] = Field(default_factory=list)


class ModelViews(CamelModel):
    data: ModelViewsData | None = None


class ObjectTreeDataObjects(CamelModel):
    objectid: int | None = None
    name: str | None = None
    external_id: str | None = None
    objects: list[ObjectTreeDataObjects] | None = None


class ObjectTreeData(CamelModel):
    type: str | None = None
    objects: list[ObjectTreeDataObjects] = Field(default_factory=list)


class ObjectTree(CamelModel):
    """Object hierarchy of a model view.

    While the tree is still being extracted the service answers 202 with only
    ``result`` set and ``data`` left empty.
    """

    data: ObjectTreeData | None = None
    result: str | None = None


class PropertiesDataCollection(CamelModel):
    objectid: int | None = None
    name: str | None = None
    external_id: str | None = None
    properties: dict[str, Any] | None = None


class PropertiesData(CamelModel):
    type: str | None = None
    collection: list[PropertiesDataCollection] = Field(default_factory=list)


class Properties(CamelModel):
    data: PropertiesData | None = None
    result: str | None = None


class SpecificPropertiesPayloadPagination(CamelModel):
    offset: int | None = None
    limit: int | None = None


class SpecificPropertiesPayload(CamelModel):
    """Body of a ``properties:query`` request.

    ``query`` is passed through verbatim, e.g. ``{"$in": ["objectid", [1, 2]]}``.
    """

    query: dict[str, Any] | None = None
    fields: list[str] | None = None
    pagination: SpecificPropertiesPayloadPagination | None = None
    payload: Literal["text", "default"] | None = None


class SpecificPropertiesPagination(CamelModel):
    limit: int | None = None
    offset: int | None = None
    total_results: int | None = None


class SpecificPropertiesData(CamelModel):
    type: str | None = None
    collection: list[PropertiesDataCollection] = Field(default_factory=list)


class SpecificProperties(CamelModel):
    pagination: SpecificPropertiesPagination | None = None
    data: SpecificPropertiesData | None = None


# Informational


class SupportedFormats(CamelModel):
    """Mapping of output format to the source file extensions it accepts."""

    formats: dict[str, list[str]] = Field(default_factory=dict)
