# models/__init__.py

from .presenter import Presenter
from .score import Score
from .award_winner import AwardWinner
from .feedback import Feedback
