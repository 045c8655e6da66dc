# Importing the provider modules registers them
from . import google_news, mock_news, mock_people, mock_social  # noqa: F401
