"""Photo upload, metadata and query schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel
from pydantic import Field

from proofing.schemas.common import Cuid

MAX_UPLOAD_BYTES = 100 * 1024 * 1024

Filename = Annotated[str, Field(min_length=1, max_length=500)]
PositiveInt = Annotated[int, Field(gt=0)]
PositiveFloat = Annotated[float, Field(gt=0)]


class ImageMimeType(str, Enum):
    """Browser-displayable image formats."""

    JPEG = "image/jpeg"
    JPG = "image/jpg"
    PNG = "image/png"
    TIFF = "image/tiff"
    WEBP = "image/webp"
    GIF = "image/gif"


class PhotoMimeType(str, Enum):
    """Formats accepted for direct uploads, camera RAW included."""

    JPEG = "image/jpeg"
    JPG = "image/jpg"
    PNG = "image/png"
    TIFF = "image/tiff"
    WEBP = "image/webp"
    GIF = "image/gif"
    CANON_CR2 = "image/x-canon-cr2"
    NIKON_NEF = "image/x-nikon-nef"
    SONY_ARW = "image/x-sony-arw"
    FUJI_RAF = "image/x-fuji-raf"
    OLYMPUS_ORF = "image/x-olympus-orf"
    PANASONIC_RW2 = "image/x-panasonic-rw2"
    ADOBE_DNG = "image/x-adobe-dng"
    PENTAX_PEF = "image/x-pentax-pef"
    KODAK_DCR = "image/x-kodak-dcr"
    KODAK_K25 = "image/x-kodak-k25"
    KODAK_KDC = "image/x-kodak-kdc"
    MINOLTA_MRW = "image/x-minolta-mrw"
    SONY_SRF = "image/x-sony-srf"
    SONY_SR2 = "image/x-sony-sr2"
    # unrecognized RAW formats
    OCTET_STREAM = "application/octet-stream"


class PhotoUploadMetadata(BaseModel):
    original_filename: Filename
    mime_type: ImageMimeType
    size: PositiveInt
    width: PositiveInt | None = None
    height: PositiveInt | None = None


class ExifMetadata(BaseModel):
    """Camera metadata extracted from an uploaded file."""

    camera_make: Annotated[str, Field(max_length=100)] | None = None
    camera_model: Annotated[str, Field(max_length=100)] | None = None
    date_time_original: datetime | None = None
    iso: PositiveInt | None = None
    focal_length: PositiveFloat | None = None
    aperture: PositiveFloat | None = None
    shutter_speed: Annotated[str, Field(max_length=50)] | None = None


class CreatePhoto(BaseModel):
    """Photo record fields written after an upload is confirmed."""

    filename: Filename
    original_filename: Filename
    mime_type: ImageMimeType
    size: PositiveInt
    width: PositiveInt | None = None
    height: PositiveInt | None = None
    storage_key: Annotated[str, Field(min_length=1)]
    thumbnail_storage_key: str | None = None
    album_id: Cuid
    exif_camera_make: Annotated[str, Field(max_length=100)] | None = None
    exif_camera_model: Annotated[str, Field(max_length=100)] | None = None
    exif_date_time_original: datetime | None = None
    exif_iso: PositiveInt | None = None
    exif_focal_length: PositiveFloat | None = None
    exif_aperture: PositiveFloat | None = None
    exif_shutter_speed: Annotated[str, Field(max_length=50)] | None = None


class UpdatePhoto(BaseModel):
    filename: Filename | None = None
    description: Annotated[str, Field(max_length=2000)] | None = None


class PhotoId(BaseModel):
    id: Cuid


class PhotoQuery(BaseModel):
    album_id: Cuid | None = None
    search: Annotated[str, Field(max_length=255)] | None = None
    mime_type: ImageMimeType | None = None


class PresignedUrlRequest(BaseModel):
    """Request for a presigned direct-upload URL."""

    album_id: Cuid
    filename: Filename
    content_type: PhotoMimeType
    file_size: Annotated[int, Field(gt=0, le=MAX_UPLOAD_BYTES)]
