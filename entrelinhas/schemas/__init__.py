from entrelinhas.schemas.common import MessageResponse
from entrelinhas.schemas.user import UserCreate, LoginRequest, Token
from entrelinhas.schemas.comment import CommentCreate, CommentCreated, CommentResponse, HistoryCommentResponse
from entrelinhas.schemas.post import PostCreate, PostResponse, LikeResponse, ReportResponse, HistoryResponse
