from typing import Any, AsyncGenerator, List
from datetime import datetime, timezone
import time
import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import FormData, UploadFile
from starlette.formparsers import MultiPartException, MultiPartParser

from talkus.core.config import settings
from talkus.core.storage import ImageUploader, get_image_uploader
from talkus.deps import get_post_service
from talkus.modules.posts.models.post import Post
from talkus.modules.posts.schemas.post import Post as PostSchema
from talkus.modules.posts.services.post import PostService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[PostSchema])
def read_posts(
    post_service: PostService = Depends(get_post_service),
) -> Any:
    """
    Retrieve all posts, newest first.
    """
    try:
        return post_service.get_all_posts()
    except Exception as e:
        logger.error(f"Error getting posts: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor",
        )

async def _bounded_stream(request: Request) -> AsyncGenerator[bytes, None]:
    """Yield the request body, failing once it grows past MAX_FORM_SIZE"""
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > settings.MAX_FORM_SIZE:
            raise MultiPartException("request body too large")
        yield chunk

async def _parse_form(request: Request) -> FormData:
    """Parse the multipart body, bounded by MAX_FORM_SIZE"""
    declared_length = request.headers.get("content-length", "")
    if declared_length.isdigit() and int(declared_length) > settings.MAX_FORM_SIZE:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Error parsing form: request body too large",
        )

    # Chunked bodies carry no Content-Length, so the cap is also enforced while reading
    parser = MultiPartParser(
        request.headers,
        _bounded_stream(request),
        max_part_size=settings.MAX_FORM_SIZE,
    )
    try:
        return await parser.parse()
    except MultiPartException as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Error parsing form: {e.message}",
        )

def _form_text(form: FormData, name: str) -> str:
    value = form.get(name)
    return value if isinstance(value, str) else ""

async def _handle_image_upload(image: Any, image_uploader: ImageUploader) -> str:
    """Upload the image part if there is one and return its URL, "" otherwise"""
    if not isinstance(image, UploadFile) or not image.filename:
        return ""

    # Format checks are left to the image host; a rejected file is an upload failure
    public_id = f"post_{int(time.time())}"
    try:
        return await run_in_threadpool(
            image_uploader.upload,
            image.file,
            settings.POST_IMAGES_FOLDER,
            public_id,
            image.content_type,
        )
    except Exception as e:
        logger.error(f"Error uploading image {image.filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error subiendo imagen",
        )

@router.post("", response_model=PostSchema, status_code=status.HTTP_201_CREATED)
async def create_new_post(
    request: Request,
    post_service: PostService = Depends(get_post_service),
    image_uploader: ImageUploader = Depends(get_image_uploader),
) -> Any:
    """
    Create a new post from a multipart form with `title`, `content` and an
    optional `image` file. The image is stored on the image host and its URL
    saved with the post.
    """
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith("multipart/form-data"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Content-Type debe ser multipart/form-data",
        )

    form = await _parse_form(request)
    try:
        title = _form_text(form, "title")
        content = _form_text(form, "content")
        if not title or not content:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="title y content son obligatorios",
            )

        image_url = await _handle_image_upload(form.get("image"), image_uploader)

        now = datetime.now(timezone.utc)
        post = Post(
            title=title,
            content=content,
            image_url=image_url,
            likes=0,
            dislikes=0,
            is_flagged=False,
            created_at=now,
            updated_at=now,
        )

        try:
            return await run_in_threadpool(post_service.create_post, post)
        except Exception as e:
            logger.error(f"Error creating post: {e}")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="No se pudo crear el post",
            )
    finally:
        await form.close()
