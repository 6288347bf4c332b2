"""Jump-split worker streams and the deterministic sampling run."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Union

from .xoshiro import DEFAULT_SEED, Xoshiro256

logger = logging.getLogger(__name__)

OUTPUT_KINDS = ("u64", "float_co", "float_cc", "double_co", "double_cc")


def jump_streams(root: Xoshiro256, count: int) -> List[Xoshiro256]:
    """Derive ``count`` non-overlapping generators from ``root``.

    Stream 0 continues exactly where ``root`` stands; each later stream is
    the previous one jumped by 2**128 words. ``root`` itself is not touched.
    """

    streams: List[Xoshiro256] = []
    current = root.copy()
    for index in range(count):
        if index:
            current = current.copy()
            current.jump()
        streams.append(current)
    logger.debug("derived %d streams from %s", count, root.to_bytes().hex())
    return streams


@dataclass
class StreamConfig:
    """Configuration for a sampling run."""

    seed: str = DEFAULT_SEED.hex()  # 32 bytes as hex
    streams: int = 1
    samples: int = 8
    kind: str = "u64"

    def seed_bytes(self) -> bytes:
        return bytes.fromhex(self.seed)

    def validate(self) -> None:
        if self.kind not in OUTPUT_KINDS:
            raise ValueError(f"Unknown output kind '{self.kind}', expected one of {OUTPUT_KINDS}")
        if self.streams < 0 or self.samples < 0:
            raise ValueError("streams and samples must not be negative")
        if len(self.seed_bytes()) != 32:
            raise ValueError(f"Seed must be 32 bytes, got {len(self.seed_bytes())}")


@dataclass
class StreamLog:
    index: int
    state: str
    samples: List[Union[int, float]]
    min: Union[int, float, None]
    max: Union[int, float, None]
    mean: Union[float, None]


def _draw(gen: Xoshiro256, kind: str) -> Union[int, float]:
    if kind == "u64":
        return gen.next_u64()
    return getattr(gen, kind)()


def run_streams(cfg: StreamConfig) -> Dict[str, Any]:
    """Seed a root generator, split it and sample every stream."""

    cfg.validate()
    root = Xoshiro256.from_seed(cfg.seed_bytes())
    logger.info(
        "sampling %d x %d %s values from seed %s", cfg.streams, cfg.samples, cfg.kind, cfg.seed
    )

    log: List[StreamLog] = []
    for index, gen in enumerate(jump_streams(root, cfg.streams)):
        state = gen.to_bytes().hex()
        samples = [_draw(gen, cfg.kind) for _ in range(cfg.samples)]
        log.append(
            StreamLog(
                index=index,
                state=state,
                samples=samples,
                min=min(samples) if samples else None,
                max=max(samples) if samples else None,
                mean=sum(samples) / len(samples) if samples else None,
            )
        )

    return {
        "config": asdict(cfg),
        "streams": [asdict(entry) for entry in log],
    }


if __name__ == "__main__":
    import json

    result = run_streams(StreamConfig())
    print(json.dumps(result, indent=2))
