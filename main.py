# main.py
import argparse

from config import AppConfig
from metrics.logging import configure_logging
from runners.run_local import main as local
from server.app import run_server

def parse_args(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("mode", choices=["server", "local"])
    p.add_argument("--port", type=int, default=None)
    p.add_argument("--episodes", type=int, default=None)
    p.add_argument("--snakes", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--avoid-snakes", action="store_true")
    p.add_argument("--seek-food", action="store_true")
    p.add_argument("--render", action="store_true")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    cfg = AppConfig.from_env()
    overrides = {
        "port": args.port,
        "episodes": args.episodes,
        "num_snakes": args.snakes,
        "seed": args.seed,
    }
    cfg = cfg.with_(**{k: v for k, v in overrides.items() if v is not None})
    return cfg.with_(
        avoid_snakes=args.avoid_snakes or cfg.avoid_snakes,
        seek_food=args.seek_food or cfg.seek_food,
        render=args.render or cfg.render,
    )

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    configure_logging(cfg.log_level)
    if args.mode == "server":
        run_server(cfg)
    elif args.mode == "local":
        local(cfg)

if __name__ == "__main__":
    main()
