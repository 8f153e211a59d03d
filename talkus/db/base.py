# Import all models here so metadata.create_all sees every table
from talkus.db.session import Base

from talkus.modules.users.models.user import User
from talkus.modules.posts.models.post import Post
