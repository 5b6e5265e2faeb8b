"""Object Storage Service: buckets, objects and signed-URL transfers."""

from .api import BucketsApi, ObjectsApi
from .client import DEFAULT_CHUNK_SIZE, OssClient
from .models import (
    Access,
    BatchcompleteuploadObject,
    BatchcompleteuploadObjectRequests,
    BatchcompleteuploadResponse,
    BatchcompleteuploadResponseResults,
    Batchsigneds3downloadObject,
    Batchsigneds3downloadObjectRequests,
    Batchsigneds3downloadResponse,
    Batchsigneds3downloadResponseResults,
    Batchsigneds3uploadObject,
    Batchsigneds3uploadObjectRequests,
    Batchsigneds3uploadResponse,
    Batchsigneds3uploadResponseResults,
    Bucket,
    BucketObjects,
    Buckets,
    BucketsItems,
    Completes3uploadBody,
    CreateBucketsPayload,
    CreateBucketsPayloadAllow,
    CreateObjectSigned,
    CreateSignedResource,
    ObjectDetails,
    ObjectFullDetails,
    Permission,
    PolicyKey,
    Region,
    Signeds3downloadResponse,
    Signeds3uploadResponse,
    With,
)

__all__ = [
    "Access",
    "BatchcompleteuploadObject",
    "BatchcompleteuploadObjectRequests",
    "BatchcompleteuploadResponse",
    "BatchcompleteuploadResponseResults",
    "Batchsigneds3downloadObject",
    "Batchsigneds3downloadObjectRequests",
    "Batchsigneds3downloadResponse",
    "Batchsigneds3downloadResponseResults",
    "Batchsigneds3uploadObject",
    "Batchsigneds3uploadObjectRequests",
    "Batchsigneds3uploadResponse",
    "Batchsigneds3uploadResponseResults",
    "Bucket",
    "BucketObjects",
    "Buckets",
    "BucketsApi",
    "BucketsItems",
    "Completes3uploadBody",
    "CreateBucketsPayload",
    "CreateBucketsPayloadAllow",
    "CreateObjectSigned",
    "CreateSignedResource",
    "DEFAULT_CHUNK_SIZE",
    "ObjectDetails",
    "ObjectFullDetails",
    "ObjectsApi",
    "OssClient",
    "Permission",
    "PolicyKey",
    "Region",
    "Signeds3downloadResponse",
    "Signeds3uploadResponse",
    "With",
]
