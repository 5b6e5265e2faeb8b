"""Model Derivative service: translate designs and read their derivatives and metadata."""

from .api import (
    DerivativesApi,
    InformationalApi,
    JobsApi,
    ManifestApi,
    MetadataApi,
    ThumbnailsApi,
)
from .client import ModelDerivativeClient
from .models import (
    DeleteManifest,
    DerivativeDownload,
    Job,
    JobAcceptedJobs,
    JobDwgOutputFormatAdvanced,
    JobIfcOutputFormatAdvanced,
    JobIgesOutputFormatAdvanced,
    JobObjOutputFormatAdvanced,
    JobPayload,
    JobPayloadFormat,
    JobPayloadFormatDWG,
    JobPayloadFormatIFC,
    JobPayloadFormatIGES,
    JobPayloadFormatOBJ,
    JobPayloadFormatSTEP,
    JobPayloadFormatSTL,
    JobPayloadFormatSVF,
    JobPayloadFormatSVF2,
    JobPayloadFormatThumbnail,
    JobPayloadInput,
    JobPayloadMisc,
    JobPayloadOutput,
    JobPayloadOutputDestination,
    JobStepOutputFormatAdvanced,
    JobStlOutputFormatAdvanced,
    JobSvf2OutputFormatAdvanced,
    JobSvf2OutputFormatAdvancedIFC,
    JobSvf2OutputFormatAdvancedNWD,
    JobSvf2OutputFormatAdvancedRVT,
    JobSvfOutputFormatAdvanced,
    JobSvfOutputFormatAdvancedIFC,
    JobSvfOutputFormatAdvancedNWD,
    JobSvfOutputFormatAdvancedRVT,
    JobThumbnailOutputFormatAdvanced,
    Manifest,
    ManifestDerivative,
    ManifestResources,
    ModelViews,
    ModelViewsData,
    ModelViewsDataMetadata,
    ObjectTree,
    ObjectTreeData,
    ObjectTreeDataObjects,
    OutputType,
    Properties,
    PropertiesData,
    PropertiesDataCollection,
    Region,
    SpecificProperties,
    SpecificPropertiesData,
    SpecificPropertiesPagination,
    SpecificPropertiesPayload,
    SpecificPropertiesPayloadPagination,
    SpecifyReferences,
    SpecifyReferencesPayload,
    SpecifyReferencesPayloadReferences,
    SupportedFormats,
    View,
    XAdsDerivativeFormat,
)

__all__ = [
    "DeleteManifest",
    "DerivativeDownload",
    "DerivativesApi",
    "InformationalApi",
    "Job",
    "JobAcceptedJobs",
    "JobDwgOutputFormatAdvanced",
    "JobIfcOutputFormatAdvanced",
    "JobIgesOutputFormatAdvanced",
    "JobObjOutputFormatAdvanced",
    "JobPayload",
    "JobPayloadFormat",
    "JobPayloadFormatDWG",
    "JobPayloadFormatIFC",
    "JobPayloadFormatIGES",
    "JobPayloadFormatOBJ",
    "JobPayloadFormatSTEP",
    "JobPayloadFormatSTL",
    "JobPayloadFormatSVF",
    "JobPayloadFormatSVF2",
    "JobPayloadFormatThumbnail",
    "JobPayloadInput",
    "JobPayloadMisc",
    "JobPayloadOutput",
    "JobPayloadOutputDestination",
    "JobStepOutputFormatAdvanced",
    "JobStlOutputFormatAdvanced",
    "JobSvf2OutputFormatAdvanced",
    "JobSvf2OutputFormatAdvancedIFC",
    "JobSvf2OutputFormatAdvancedNWD",
    "JobSvf2OutputFormatAdvancedRVT",
    "JobSvfOutputFormatAdvanced",
    "JobSvfOutputFormatAdvancedIFC",
    "JobSvfOutputFormatAdvancedNWD",
    "JobSvfOutputFormatAdvancedRVT",
    "JobThumbnailOutputFormatAdvanced",
    "JobsApi",
    "Manifest",
    "ManifestApi",
    "ManifestDerivative",
    "ManifestResources",
    "MetadataApi",
    "ModelDerivativeClient",
    "ModelViews",
    "ModelViewsData",
    "ModelViewsDataMetadata",
    "ObjectTree",
    "ObjectTreeData",
    "ObjectTreeDataObjects",
    "OutputType",
    "Properties",
    "PropertiesData",
    "PropertiesDataCollection",
    "Region",
    "SpecificProperties",
    "SpecificPropertiesData",
    "SpecificPropertiesPagination",
    "SpecificPropertiesPayload",
    "SpecificPropertiesPayloadPagination",
    "SpecifyReferences",
    "SpecifyReferencesPayload",
    "SpecifyReferencesPayloadReferences",
    "SupportedFormats",
    "ThumbnailsApi",
    "View",
    "XAdsDerivativeFormat",
]
