# This file defines hero slide, specialty, upload, and video link endpoints.
# Public reads list only active records; `/all`, single-slide reads, and every write need a session.
# Uploaded images arrive as the multipart field `image` and are stored under `/<type>/`.

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from union_cms.api.dependencies import AdminDep, RecordId, get_media_service
from union_cms.api.error_handlers import InvalidInputError
from union_cms.api.response_envelope import build_message_envelope, build_object_envelope
from union_cms.api.schemas.common import MessageResponse
from union_cms.api.schemas.media_schemas import (
    DeleteUploadRequest,
    HeroSlideCreateRequest,
    HeroSlideListResponseV1,
    HeroSlideResponseV1,
    HeroSlideUpdateRequest,
    ParseVideoRequest,
    SpecialtyCreateRequest,
    SpecialtyListResponseV1,
    SpecialtyResponseV1,
    SpecialtyUpdateRequest,
    UploadResponseV1,
    VideoInfoResponseV1,
)
from union_cms.api.services.media_service import MediaService

router = APIRouter(prefix="/api/media", tags=["media"])
MediaServiceDep = Annotated[MediaService, Depends(get_media_service)]


@router.get("/hero", response_model=HeroSlideListResponseV1)
def list_active_slides(service: MediaServiceDep) -> dict[str, object]:
    return build_object_envelope(data=service.list_active_slides())


@router.get("/hero/all", response_model=HeroSlideListResponseV1)
def list_all_slides(service: MediaServiceDep, _: AdminDep) -> dict[str, object]:
    return build_object_envelope(data=service.list_all_slides())


@router.get("/hero/{slide_id}", response_model=HeroSlideResponseV1)
def get_slide(slide_id: RecordId, service: MediaServiceDep, _: AdminDep) -> dict[str, object]:
    return build_object_envelope(data=service.get_slide(slide_id))


@router.post("/hero", status_code=201, response_model=HeroSlideResponseV1)
def create_slide(
    body: HeroSlideCreateRequest, service: MediaServiceDep, _: AdminDep
) -> dict[str, object]:
    slide = service.create_slide(body.model_dump())
    return build_object_envelope(data=slide, message="Slide added successfully")


@router.put("/hero/{slide_id}", response_model=HeroSlideResponseV1)
def update_slide(
    slide_id: RecordId,
    body: HeroSlideUpdateRequest,
    service: MediaServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    slide = service.update_slide(slide_id, body.model_dump(exclude_unset=True))
    return build_object_envelope(data=slide, message="Slide updated successfully")


@router.delete("/hero/{slide_id}", response_model=MessageResponse)
def delete_slide(slide_id: RecordId, service: MediaServiceDep, _: AdminDep) -> dict[str, object]:
    service.delete_slide(slide_id)
    return build_message_envelope(message="Slide deleted successfully")


@router.get("/specialties", response_model=SpecialtyListResponseV1)
def list_active_specialties(service: MediaServiceDep) -> dict[str, object]:
    return build_object_envelope(data=service.list_active_specialties())


@router.get("/specialties/all", response_model=SpecialtyListResponseV1)
def list_all_specialties(service: MediaServiceDep, _: AdminDep) -> dict[str, object]:
    return build_object_envelope(data=service.list_all_specialties())


@router.get("/specialties/{specialty_id}", response_model=SpecialtyResponseV1)
def get_specialty(specialty_id: RecordId, service: MediaServiceDep) -> dict[str, object]:
    return build_object_envelope(data=service.get_specialty(specialty_id))


@router.post("/specialties", status_code=201, response_model=SpecialtyResponseV1)
def create_specialty(
    body: SpecialtyCreateRequest, service: MediaServiceDep, _: AdminDep
) -> dict[str, object]:
    specialty = service.create_specialty(body.model_dump())
    return build_object_envelope(data=specialty, message="Specialty added successfully")


@router.put("/specialties/{specialty_id}", response_model=SpecialtyResponseV1)
def update_specialty(
    specialty_id: RecordId,
    body: SpecialtyUpdateRequest,
    service: MediaServiceDep,
    _: AdminDep,
) -> dict[str, object]:
    specialty = service.update_specialty(specialty_id, body.model_dump(exclude_unset=True))
    return build_object_envelope(data=specialty, message="Specialty updated successfully")


@router.delete("/specialties/{specialty_id}", response_model=MessageResponse)
def delete_specialty(
    specialty_id: RecordId, service: MediaServiceDep, _: AdminDep
) -> dict[str, object]:
    service.delete_specialty(specialty_id)
    return build_message_envelope(message="Specialty deleted successfully")


@router.post("/upload/{upload_type}", response_model=UploadResponseV1)
async def upload_image(
    upload_type: str,
    service: MediaServiceDep,
    _: AdminDep,
    image: UploadFile | None = File(default=None),
) -> dict[str, object]:
    if image is None:
        raise InvalidInputError("No file uploaded")
    # One byte past the limit is enough to know the file is too large.
    data = await image.read(service.uploads.max_bytes + 1)
    # Disk writes run off the event loop.
    stored = await run_in_threadpool(
        service.upload_image,
        upload_type=upload_type,
        filename=image.filename,
        content_type=image.content_type,
        data=data,
    )
    return build_object_envelope(
        data={"url": stored.url, "filename": stored.filename, "size": stored.size},
        message="Image uploaded successfully",
    )


@router.delete("/upload", response_model=MessageResponse)
def delete_upload(
    body: DeleteUploadRequest, service: MediaServiceDep, _: AdminDep
) -> dict[str, object]:
    service.delete_upload(body.url)
    return build_message_envelope(message="File deleted successfully")


@router.post("/parse-video", response_model=VideoInfoResponseV1)
def parse_video(body: ParseVideoRequest, service: MediaServiceDep) -> dict[str, object]:
    return build_object_envelope(data=service.parse_video(body.url))
