import argparse
import json
import logging
import sys
from datetime import date

from lucky_numbers.advisor import CombinationAdvisor, ResponsibleGaming
from lucky_numbers.config import LotteryConfigRegistry
from lucky_numbers.data import HistoryManager
from lucky_numbers.engine import LotteryEngine
from lucky_numbers.errors import LotteryError
from lucky_numbers.generator import GenerationMode, NumberGenerator
from lucky_numbers.profile import SignificantDate, UserProfile

logger = logging.getLogger(__name__)


def setup_logging(log_file=None, verbose=False):
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def build_parser():
    parser = argparse.ArgumentParser(description="Lucky Numbers: numerology, random and custom lottery combinations")
    parser.add_argument("--lottery", default="euromillions", help="Lottery id (euromillions, powerball, megamillions, spanish)")
    parser.add_argument("--mode", choices=[m.value for m in GenerationMode], default=GenerationMode.NUMEROLOGY.value,
                        help="How to pick the main numbers")
    parser.add_argument("--numbers", help="Comma-separated numbers for custom mode, e.g. 7,14,21,28,35")
    parser.add_argument("--name", default="", help="Player name (numerology mode)")
    parser.add_argument("--birth-date", default="", help="Player birth date, YYYY-MM-DD (numerology mode)")
    parser.add_argument("--significant-date", action="append", default=[],
                        help="Significant date as 'YYYY-MM-DD (label)'; can be repeated")
    parser.add_argument("--history", help="JSON file with historical draws (defaults to the bundled sample)")
    parser.add_argument("--seed", type=int, help="Seed for random draws")
    parser.add_argument("--stats", action="store_true", help="Print hot/cold numbers and latest draws")
    parser.add_argument("--today", help="Reference date for 'days since' in --stats (YYYY-MM-DD)")
    parser.add_argument("--output", help="Write the generated ticket as JSON to this file")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def print_statistics(stats):
    print(f"\n=== {stats['display_name']} statistics ({stats['draws']} draws) ===")
    print(f"Hot:  {stats['hot']}")
    print(f"Cold: {stats['cold']}")
    print("\nNumber | Count | Last seen")
    for row in stats['frequency']:
        extra = f" ({row['days_since']} days ago)" if 'days_since' in row else ""
        print(f"{row['number']:>6} | {row['occurrence_count']:>5} | {row['most_recent_date']}{extra}")
    if stats['latest']:
        print("\nLatest draws:")
        for draw in stats['latest']:
            print(f"{draw['date']}  Main: {draw['numbers']}  Bonus: {draw['bonus_numbers']}")


def print_ticket(ticket, reminder):
    combination = ticket.combination
    analysis = ticket.analysis
    print(f"\n=== {combination.lottery_id} ({combination.source_mode.value}) ===")
    print(f"Main:  {list(combination.main_numbers)}")
    print(f"Bonus: {list(combination.bonus_numbers)}")
    print(f"Hot: {analysis.hot_count} | Cold: {analysis.cold_count} | "
          f"Avg frequency: {analysis.average_frequency:.2f} | Risk: {analysis.risk_tier.value}")
    print(analysis.message)
    print(f"Jackpot chance: {ticket.jackpot_probability:.10f}%")
    print(f"\n{reminder}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    if args.mode == GenerationMode.CUSTOM.value and not args.numbers:
        parser.error("--mode custom needs --numbers")
    if args.mode == GenerationMode.NUMEROLOGY.value and not (args.name and args.birth_date):
        parser.error("--mode numerology needs --name and --birth-date")
    try:
        significant_dates = tuple(SignificantDate.parse(d) for d in args.significant_date)
    except ValueError as e:
        parser.error(str(e))

    try:
        registry = LotteryConfigRegistry()
        history = HistoryManager.from_json(args.history) if args.history else HistoryManager()
        engine = LotteryEngine(
            registry,
            history,
            generator=NumberGenerator(registry, seed=args.seed),
            advisor=CombinationAdvisor(),
        )

        if args.stats:
            today = date.fromisoformat(args.today) if args.today else None
            print_statistics(engine.statistics(args.lottery, today=today))

        profile = UserProfile(
            name=args.name,
            birth_date=args.birth_date,
            significant_dates=significant_dates,
            preferred_lotteries=frozenset([args.lottery]),
        )
        ticket = engine.play(profile, args.lottery, args.mode, custom=args.numbers)
        print_ticket(ticket, ResponsibleGaming(seed=args.seed).pick())

        if args.output:
            with open(args.output, 'w') as f:
                json.dump(ticket.to_dict(), f, indent=4)
            logger.info("Ticket saved to %s", args.output)
        return 0

    except LotteryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        logger.error("Fatal error: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

# python3 main.py --name "Ana Lopez" --birth-date 1990-05-15 --significant-date "2015-06-20 (Wedding)"
# python3 main.py --mode custom --numbers 7,14,21,28,35 --stats --today 2024-09-25
