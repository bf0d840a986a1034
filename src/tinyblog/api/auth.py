"""Authentication API endpoints."""

from fastapi import APIRouter, Depends

from tinyblog.schemas.user import Subject, Token, UserCreate, UserLogin, UserResponse
from tinyblog.services.users import CredentialStore, get_credential_store
from tinyblog.utils.security import CurrentSubject, issue_token

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(
    user_data: UserCreate,
    store: CredentialStore = Depends(get_credential_store),
) -> UserResponse:
    """Register a new user.

    The password is securely hashed before storage.

    Raises:
        DuplicateUsernameError (400): If the username already exists
    """
    new_user = await store.register(user_data.username, user_data.password)

    return UserResponse(
        id=new_user.id,
        username=new_user.username,
        created_at=new_user.created_at,
    )


@router.post("/login", response_model=Token)
async def login(
    credentials: UserLogin,
    store: CredentialStore = Depends(get_credential_store),
) -> Token:
    """Authenticate user and return a JWT token.

    Unknown usernames and wrong passwords produce the same response.

    Raises:
        InvalidCredentialsError (401): If credentials are invalid
    """
    user = await store.verify(credentials.username, credentials.password)

    token = issue_token(user.id, user.username)
    return Token(token=token, username=user.username, token_type="bearer")


@router.get("/me", response_model=Subject)
async def get_current_user_info(current_subject: CurrentSubject) -> Subject:
    """Get the identity carried by the caller's token.

    Requires a valid JWT token in the Authorization header.
    """
    return current_subject
