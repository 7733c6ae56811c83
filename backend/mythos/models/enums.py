"""Shared enums for models and scoring."""
import enum


class MediaCategory(enum.Enum):
    """Kinds of media a student can log."""
    written_story = "Written Story (book, online, etc)"
    movie_tv_play = "Movie/TV Show/Play/Musical"
    video_game = "Video Game"
    podcast_audio = "Podcast/Audio"
    graphic_novel = "Graphic Novel/Comic Book"
    other = "Other"
