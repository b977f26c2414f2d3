"""
Facade pattern.

``MultimediaFacade`` hides three subsystems behind one ``play_media`` call.
"""

from enum import Enum

from catalog.observability.logging import get_logger
from catalog.patterns.base import PatternDemo
from catalog.registry import PatternCategory, demo

logger = get_logger("patterns.facade")


class AudioPlayer:
    def play_audio(self, file_name: str) -> None:
        print(f"Playing audio file: {file_name}")


class VideoPlayer:
    def play_video(self, file_name: str) -> None:
        print(f"Playing video file: {file_name}")


class DisplayController:
    def display_output(self) -> None:
        print("Displaying output")


class MediaType(Enum):
    """Kinds of media the facade may be asked to play."""

    AUDIO = "audio"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"


class MultimediaFacade:
    """Single entry point over the audio, video and display subsystems."""

    def __init__(self) -> None:
        self._audio_player = AudioPlayer()
        self._video_player = VideoPlayer()
        self._display_controller = DisplayController()

    def play_media(self, file_name: str, media_type: MediaType) -> None:
        """Play a file with the matching player, then refresh the display.

        Unsupported media types print a message instead of playing; the
        display is refreshed either way.
        """
        if media_type is MediaType.AUDIO:
            self._audio_player.play_audio(file_name)
        elif media_type is MediaType.VIDEO:
            self._video_player.play_video(file_name)
        else:
            logger.debug(f"Unsupported media type for {file_name}: {media_type.value}")
            print("Unsupported media type")
        self._display_controller.display_output()


@demo(
    name="facade",
    category=PatternCategory.STRUCTURAL,
    description="Provide a simple interface to a complex set of subsystems.",
)
class FacadeDemo(PatternDemo):
    """Play an audio file, a video file and an unsupported file."""

    def run(self) -> None:
        facade = MultimediaFacade()
        facade.play_media("song.mp3", MediaType.AUDIO)
        facade.play_media("movie.mp4", MediaType.VIDEO)
        facade.play_media("image.jpg", MediaType.UNSUPPORTED)
