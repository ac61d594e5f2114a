# __init__.py
from jobnet.models.connection import Connection
from jobnet.models.job import Job, JobApplication
from jobnet.models.message import Message
from jobnet.models.payment_log import PaymentLog
from jobnet.models.post import CommentLike, Post, PostComment, PostLike, PostShare
from jobnet.models.user import User

__all__ = [
	"CommentLike",
	"Connection",
	"Job",
	"JobApplication",
	"Message",
	"PaymentLog",
	"Post",
	"PostComment",
	"PostLike",
	"PostShare",
	"User",
]
