"""Frame loop for the bouncing-point animation.

One logical thread runs the whole animation:

  check stop  ->  reversal check  ->  advance points  ->  rasterize
       ^                                                      |
       +----------  elapsed += 1/frame_rate  <-  sleep  <-  write

States: RUNNING -> STOPPED. The transition fires once the config's
frame_budget is used up (never, for a negative duration) or when a stop has
been requested through request_stop(). Frame k starts at k / frame_rate
seconds of simulated time and runs only while that is below
total_duration, so sleep jitter never changes how many frames run.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generator, Optional

from loguru import logger

from ..config import AnimationConfig, TrailMode
from ..constants import INITIAL_REVERSAL_SIGN, REVERSAL_TOLERANCE
from ..curves import Curve
from ..points import PointTrail
from ..render import LineWriter, rasterize


class AnimationState(Enum):
    """Animation loop states."""
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass(frozen=True)
class Frame:
    """One rendered frame.

    Attributes:
        tick: Zero-based frame number
        elapsed: Simulated time at the start of the frame (seconds)
        reversal_sign: Half-cycle flag used to advance this frame
        points: Point sequence after advancing
        line: Rasterized text (exactly output_width characters)
    """
    tick: int
    elapsed: float
    reversal_sign: int
    points: PointTrail
    line: str


class Animation:
    """Fixed-rate point animation along a curve.

    Usage:
        curve = make_curve("ellipse")
        animation = Animation(curve, AnimationConfig(total_duration=5))
        animation.run()
    """

    def __init__(
        self,
        curve: Curve,
        config: Optional[AnimationConfig] = None,
        writer: Optional[LineWriter] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config if config is not None else AnimationConfig()
        self.curve = curve.with_step(self.config.step)
        self.writer = writer if writer is not None else LineWriter(redraw=self.config.redraw)
        self.sleep = sleep
        self.frame_budget = self.config.frame_budget
        self.reset()

    def reset(self):
        """Return to the initial RUNNING state with every point at (0, 0, +1)."""
        self.points = PointTrail(self.config.point_count)
        self.reversal_sign = INITIAL_REVERSAL_SIGN
        self.tick = 0
        self.state = AnimationState.RUNNING
        self._stop_requested = False

    # -------------------------------------------------------------------------
    # Timing
    # -------------------------------------------------------------------------

    @property
    def elapsed(self) -> float:
        """Simulated seconds since the start of the run."""
        return self.tick / self.config.frame_rate

    def request_stop(self):
        """Ask the loop to stop before its next frame."""
        self._stop_requested = True

    def should_stop(self) -> bool:
        if self._stop_requested:
            return True
        if self.frame_budget is None:
            return False
        return self.tick >= self.frame_budget

    # -------------------------------------------------------------------------
    # Per-frame steps
    # -------------------------------------------------------------------------

    @property
    def reversal_tolerance(self) -> float:
        return REVERSAL_TOLERANCE * self.curve.render_span

    def check_reversal(self) -> int:
        """Flip the reversal sign when the last point sits at either extreme.

        Returns:
            The reversal sign to use for this frame
        """
        last = float(self.points.render[-1])
        tolerance = self.reversal_tolerance
        if last >= self.curve.render_span - tolerance or last <= tolerance:
            self.reversal_sign = -self.reversal_sign
            logger.debug(f"Reversal at tick {self.tick}: render={last:.4f} -> sign {self.reversal_sign:+d}")
        return self.reversal_sign

    def advance_points(self) -> PointTrail:
        """Advance the point sequence by one frame.

        TRAIL mode advances only the head and shifts the rest left by one,
        so slot k holds where the head was (length - 1 - k) frames ago.
        UNIFORM mode advances every point independently.
        """
        if self.config.mode is TrailMode.TRAIL:
            head = self.points.head
            new_head = self.curve.advance(head, self.reversal_sign)
            if new_head.direction != head.direction:
                logger.debug(
                    f"Head reflected at index {head.index_position:.3f}: "
                    f"direction {new_head.direction:+d}"
                )
            advanced = self.points.shifted(new_head)
        else:
            advanced = PointTrail(self.config.point_count)
            advanced.index, advanced.render, advanced.direction = self.curve.advance_arrays(
                self.points.index,
                self.points.direction,
                self.reversal_sign,
            )

        assert len(advanced) == self.config.point_count, \
            f"point sequence length changed: {len(advanced)} != {self.config.point_count}"
        return advanced

    # -------------------------------------------------------------------------
    # Loop
    # -------------------------------------------------------------------------

    def frames(self) -> Generator[Frame, None, None]:
        """Yield frames until the stop condition holds.

        Does not write or sleep; run() adds both.

        Raises:
            RuntimeError: If the animation already stopped (call reset() first)
        """
        if self.state is AnimationState.STOPPED:
            raise RuntimeError("Animation already stopped; call reset() to run again")

        while True:
            if self.should_stop():
                self.state = AnimationState.STOPPED
                reason = "stop requested" if self._stop_requested else "duration reached"
                logger.info(f"Animation stopped after {self.tick} frames ({reason})")
                return

            sign = self.check_reversal()
            self.points = self.advance_points()
            line = rasterize(
                self.points,
                self.config.output_width,
                self.curve.render_extent,
                self.config.marker,
            )
            logger.trace(f"tick={self.tick} head={self.points.head} sign={sign:+d}")

            yield Frame(self.tick, self.elapsed, sign, self.points, line)
            self.tick += 1

    def run(self) -> int:
        """Run the animation to completion, writing one line per frame.

        Blocks for roughly total_duration seconds (forever for a negative
        duration unless request_stop() is called). Write errors propagate.

        Returns:
            Number of frames rendered
        """
        logger.info(f"Starting {self.curve.name} animation: {self.config.summary()}")

        rendered = 0
        for frame in self.frames():
            self.writer.write(frame.line)
            rendered += 1
            self.sleep(self.config.frame_period)

        self.writer.close()
        return rendered
