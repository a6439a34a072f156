from dataclasses import dataclass


@dataclass
class TrainerConfig:
    symbols: int = 1000
    min_freq: int = 2
    tokenizer: str = "simple"
    byte_level: bool = False
    mark_end_of_word: bool = True
    log_every: int = 100

    def __post_init__(self) -> None:
        if self.min_freq < 1:
            raise ValueError(f"min_freq must be at least 1, got {self.min_freq}")
        if self.log_every < 1:
            raise ValueError(f"log_every must be at least 1, got {self.log_every}")
