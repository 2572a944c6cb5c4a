"""Base command class for video library operations."""

from typing import List, Optional, Sequence

from ..errors import InvalidArgumentsError
from ..logging_config import get_logger
from ..models import CommandResult
from ..player import VideoPlayer

# Get logger for this module
logger = get_logger(__name__)


class PlayerCommand:
    """Base class for text commands.

    Subclasses set name, usage and the accepted argument counts, and
    implement _run. max_args of None accepts any number of trailing args.
    """

    name = ""
    usage = ""
    help = ""
    min_args = 0
    max_args: Optional[int] = 0

    def __init__(
        self, player: VideoPlayer, args: Sequence[str] = (), text: Optional[str] = None
    ):
        """Initialize command.

        Args:
            player: Player the command runs against
            args: Command arguments, already split on whitespace
            text: Everything after the command word, unsplit. Defaults to
                the arguments joined by single spaces.
        """
        self.player = player
        self.args: List[str] = list(args)
        self.text = (text if text is not None else " ".join(self.args)).strip()
        self._validated = False

    def validate(self) -> None:
        """Validate command parameters.

        Raises:
            ValueError: If no player is given
            InvalidArgumentsError: If the number of arguments is wrong
        """
        if not self.player:
            raise ValueError("Video player is required")
        if len(self.args) < self.min_args or (
            self.max_args is not None and len(self.args) > self.max_args
        ):
            raise InvalidArgumentsError(self.usage or self.name)
        self._validated = True

    def run(self) -> CommandResult:
        """Run the command.

        Returns:
            CommandResult: Outcome of the command

        Raises:
            InvalidArgumentsError: If the arguments are invalid
        """
        self.validate()
        logger.debug("Running %s %s", self.name, self.args)
        return self._run()

    def _run(self) -> CommandResult:
        """Internal run implementation.

        Returns:
            CommandResult: Outcome of the command
        """
        return CommandResult()
