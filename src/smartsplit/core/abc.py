"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, List, Any

class Segmenter(Protocol):
    """Text segmenter. SentenceSplitter is the default implementation."""
    
    def segment(self, text: str) -> List[str]:
        """
        Segment text into sentences.
        
        Args:
            text: Input text to segment
            
        Returns:
            List[str]: Ordered list of sentences
        """
        ...

class Logger(Protocol):
    """Optional structured logging interface."""
    
    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...
        
    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...
        
    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""
    
    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...
        
    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
