"""ffmpeg command construction for the side-by-side video."""

import logging
import shlex
from typing import List

from .models import Alignment, DisplayClip
from .utils import format_seconds

logger = logging.getLogger(__name__)

FADE_DURATION = 1000


class EncodeCommandBuilder:
    """
    Builds the ffmpeg commands that render the split video.

    The filter graph uses:

      [v] scale  - brings both videos to the same height
      [v] fade   - fade-in and fade-out
      [v] hstack - stacks both videos horizontally
      [a] volume - evens out the volume between both streams
      [a] afade  - audio fades matching the video fades
      [a] amerge - merges both audio streams into one
    """

    def __init__(self, executable: str = 'ffmpeg'):
        self.executable = executable

    def build(self, alignment: Alignment) -> List[List[str]]:
        """
        Return the commands (currently always one) that create the video.

        Args:
            alignment: Prepared clips and resolved options

        Returns:
            List of ffmpeg argument lists
        """
        options = alignment.options
        complete = alignment.complete
        clips = (alignment.left, alignment.right)

        cmd = [self.executable, '-y']
        for clip in clips:
            # Seek before input
            cmd.extend(['-ss', clip.start_text, '-i', clip.filename])
        cmd.extend(['-t', complete.length_text])

        # Fade out from the first frame when the clip is shorter than the fade
        fade_out_start = format_seconds(max(0, complete.duration - FADE_DURATION))
        video_filters = ','.join([
            f"scale=-1:{options.output_height}",
            "fade=type=in:duration=1:start_time=0.05",
            f"fade=type=out:duration=1:start_time={fade_out_start}",
        ])
        graph = [f"[{n}:v]{video_filters}[v{n}]" for n in range(len(clips))]
        graph.append("[v0][v1]hstack=inputs=2[v]")
        graph.extend(
            self._audio_filter(n, clip, fade_out_start)
            for n, clip in enumerate(clips)
        )
        graph.append("[a0][a1]amerge=inputs=2[a]")

        cmd.extend([
            '-filter_complex', ';'.join(graph),
            '-map', '[v]',
            '-map', '[a]',
            '-ac', '2',
            options.output_file,
        ])
        logger.debug(f"Command: {self.render(cmd)}")
        return [cmd]

    @staticmethod
    def _audio_filter(stream: int, clip: DisplayClip, fade_out_start: str) -> str:
        filters = ','.join([
            f"volume={clip.volume}",
            "afade=type=in:duration=1:start_time=0",
            f"afade=type=out:duration=1:start_time={fade_out_start}",
        ])
        return f"[{stream}:a]{filters}[a{stream}]"

    @staticmethod
    def render(cmd: List[str]) -> str:
        """Quote a command for a POSIX shell."""
        return shlex.join(cmd)
