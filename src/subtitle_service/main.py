"""
Subtitle Service.

Entry point: turns a stored video into a published WebVTT subtitle track.
"""

from subtitle_service.dependencies import get_handler
from subtitle_service.handlers import SubtitleHandler


def transcribe_and_generate_subtitle(
    video_location: str, handler: SubtitleHandler | None = None
) -> str:
    """
    Transcribes a video and returns the public URL of its subtitle file.

    Args:
        video_location: S3 location of the video, e.g. `s3://bucket/videos/a.mp4`
            or `https://bucket.s3.us-east-1.amazonaws.com/videos/a.mp4`.
        handler: Handler to run the workflow with; defaults to one configured
            from the environment.

    Raises:
        SubtitleWorkflowError: The subclass names the stage that failed.
    """
    handler = handler or get_handler()
    return handler.process(video_location).subtitle_url
