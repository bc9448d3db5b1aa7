"""Event emitter for pipeline progress notifications.

Events emitted by LatestReleasePipeline and their keyword data:

- 'stage:start': stage, message
- 'stage:complete': stage plus stage counters
  (locate: archives_count; inspect: processed, skipped;
  resolve: files_count; report: path)
- 'archive:inspected': path, files_count
- 'archive:skipped': path, reason
"""

from typing import Callable, Dict, List


class SimpleEmitter:
    """Dispatches named pipeline events to subscribed handlers.

    The pipeline only knows the emitter, so the CLI presenter can draw
    spinners while tests subscribe plain lists or stay silent.

    Example:
        >>> skipped = []
        >>> emitter = SimpleEmitter().on('archive:skipped', lambda **kw: skipped.append(kw['path']))
        >>> emitter.emit('archive:skipped', path='broken.zip', reason='bad')
        >>> skipped
        ['broken.zip']
    """

    def __init__(self):
        self._handlers: Dict[str, List[Callable]] = {}

    def on(self, event: str, handler: Callable) -> 'SimpleEmitter':
        """Register handler for event and return the emitter for chaining."""
        self._handlers.setdefault(event, []).append(handler)
        return self

    def emit(self, event: str, **data):
        """Call every handler registered for event with data as keywords.

        Events nobody subscribed to are dropped.
        """
        for handler in self._handlers.get(event, []):
            handler(**data)
