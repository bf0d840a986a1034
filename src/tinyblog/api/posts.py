"""Post API endpoints."""

from fastapi import APIRouter, Depends

from tinyblog.models.post import Post
from tinyblog.schemas.post import MessageResponse, PostCreate, PostResponse, PostUpdate
from tinyblog.services.posts import PostService, get_post_service
from tinyblog.utils.security import CurrentSubject

router = APIRouter(prefix="/posts", tags=["posts"])


def post_to_response(post: Post) -> PostResponse:
    """Convert a Post model to PostResponse schema.

    Requires post.author to be loaded.
    """
    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        author_id=post.author_id,
        author=post.author.username,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


@router.get("", response_model=list[PostResponse])
async def list_posts(
    current_subject: CurrentSubject,  # noqa: ARG001 - Required for auth enforcement
    service: PostService = Depends(get_post_service),
) -> list[PostResponse]:
    """List all posts, newest first.

    All authenticated users can view all posts.
    """
    posts = await service.list_all()
    return [post_to_response(post) for post in posts]


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    current_subject: CurrentSubject,  # noqa: ARG001 - Required for auth enforcement
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Get a single post.

    Any authenticated user can view any post.
    """
    return post_to_response(await service.get_by_id(post_id))


@router.post("", response_model=PostResponse, status_code=201)
async def create_post(
    current_subject: CurrentSubject,
    post_data: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Create a new post owned by the current user."""
    post = await service.create(current_subject.id, post_data.title, post_data.content)
    return post_to_response(post)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: int,
    current_subject: CurrentSubject,
    post_data: PostUpdate,
    service: PostService = Depends(get_post_service),
) -> PostResponse:
    """Replace a post's title and content.

    Only the owner can update a post; anyone else gets the same 404 as for
    a post that does not exist.
    """
    post = await service.update(current_subject.id, post_id, post_data.title, post_data.content)
    return post_to_response(post)


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: int,
    current_subject: CurrentSubject,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post.

    Only the owner can delete a post; anyone else gets the same 404 as for
    a post that does not exist.
    """
    await service.delete(current_subject.id, post_id)
    return MessageResponse(message="Post deleted successfully")
