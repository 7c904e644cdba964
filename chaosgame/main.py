import argparse
import logging

from chaosgame import config
from chaosgame.engine import Engine


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Chaos game fractal")
    parser.add_argument("--config", help="YAML config file (defaults to the packaged chaos.yaml)")
    parser.add_argument("--seed", type=int, help="RNG seed for reproducible runs")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = config.load_config(args.config)
    if args.seed is not None:
        cfg.seed = args.seed
    logging.getLogger().setLevel(getattr(logging, str(cfg.log_level).upper(), logging.INFO))

    engine = Engine(cfg)
    engine.run()


if __name__ == "__main__":
    main()
