# __init__.py
from jobnet.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from jobnet.schemas.connection import ConnectionRead, ConnectionRequest
from jobnet.schemas.job import JobCreate, JobRead, JobUpdate, Pagination
from jobnet.schemas.message import MessageRead, SendMessageRequest
from jobnet.schemas.payment import PaymentCreate, PaymentRead
from jobnet.schemas.post import CommentCreate, PostCreate, PostRead, PostUpdate
from jobnet.schemas.user import TokenData, UserPublic, UserRead, UserUpdate

__all__ = [
	"AuthResponse",
	"LoginRequest",
	"RegisterRequest",
	"ConnectionRead",
	"ConnectionRequest",
	"JobCreate",
	"JobRead",
	"JobUpdate",
	"Pagination",
	"MessageRead",
	"SendMessageRequest",
	"PaymentCreate",
	"PaymentRead",
	"CommentCreate",
	"PostCreate",
	"PostRead",
	"PostUpdate",
	"TokenData",
	"UserPublic",
	"UserRead",
	"UserUpdate",
]
