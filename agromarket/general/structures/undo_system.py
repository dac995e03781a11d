# undo_system.py
import logging
from typing import Generic, List, Optional, TypeVar

from agromarket.general.config import DEFAULT_MAX_HISTORY
from agromarket.general.structures.adts import Stack

T = TypeVar("T")

logger = logging.getLogger('UndoRedoManager')


class UndoRedoManager(Generic[T]):
    """
    Undo/redo history built on two bounded stacks.
    A new action clears the redo history; undo moves a state from the
    undo stack onto the redo stack and redo moves it back.
    """

    def __init__(self, max_history: int = DEFAULT_MAX_HISTORY):
        if max_history < 1:
            max_history = 1
        self.max_history = max_history
        self._undo_stack: Stack[T] = Stack(max_history)
        self._redo_stack: Stack[T] = Stack(max_history)

    def execute(self, state: T) -> bool:
        """Records a new state. Returns False if the history is full and the state was dropped."""
        stored = self._undo_stack.push(state)
        if not stored:
            logger.debug(f"Undo history full ({self.max_history}); state not recorded")
        self._redo_stack.clear()
        return stored

    def undo(self) -> Optional[T]:
        state = self._undo_stack.pop()
        if state is None:
            return None
        self._redo_stack.push(state)
        return state

    def redo(self) -> Optional[T]:
        state = self._redo_stack.pop()
        if state is None:
            return None
        self._undo_stack.push(state)
        return state

    def undo_n_steps(self, n: int) -> List[T]:
        """Undoes up to n states, newest first."""
        undone: List[T] = []
        if n <= 0:
            return undone
        steps = min(n, self._undo_stack.size())
        for _ in range(steps):
            state = self.undo()
            if state is None:
                break
            undone.append(state)
        logger.debug(f"Undid {len(undone)} of {n} requested step(s)")
        return undone

    def can_undo(self) -> bool:
        return not self._undo_stack.is_empty()

    def can_redo(self) -> bool:
        return not self._redo_stack.is_empty()

    def get_current_state(self) -> Optional[T]:
        return self._undo_stack.peek()

    def history_size(self) -> int:
        return self._undo_stack.size()

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()
