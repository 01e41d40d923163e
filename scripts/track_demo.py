"""Track one event through a hand-wired or settings-wired pipeline.

Usage:
    python scripts/track_demo.py [NAME] [PAYLOAD] [--from-settings]

Examples:
    python scripts/track_demo.py
    python scripts/track_demo.py Purchase '{"amount":12.5}'
    TRACKING_POLICY=broadcast TRACKING_PROVIDERS=google_analytics,mixpanel \
        python scripts/track_demo.py --from-settings
"""

import argparse
import sys

from pydantic import ValidationError

from tracklane import (
    BroadcastPolicy,
    Dispatcher,
    GoogleAnalyticsBinding,
    LoggingEmitter,
    MixpanelBinding,
    TrackingException,
)
from tracklane.adapters.providers.sdks import GoogleAnalyticsSdk, MixpanelSdk
from tracklane.core.config import get_settings
from tracklane.core.container import create_container
from tracklane.core.logging import LoggerConfigurator


def build_default_dispatcher() -> Dispatcher:
    """Google Analytics behind a logging wrapper, broadcast alongside Mixpanel."""
    logged_ga = LoggingEmitter(GoogleAnalyticsBinding(GoogleAnalyticsSdk()))
    mixpanel = MixpanelBinding(MixpanelSdk())

    dispatcher = Dispatcher()
    dispatcher.set_policy(BroadcastPolicy([logged_ga, mixpanel]))
    return dispatcher


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("name", nargs="?", default="UserSignup")
    parser.add_argument("payload", nargs="?", default="{userId:42}")
    parser.add_argument(
        "--from-settings",
        action="store_true",
        help="Wire the pipeline from environment settings instead of the default demo",
    )
    args = parser.parse_args()
    LoggerConfigurator.add_console_handler()

    try:
        if args.from_settings:
            dispatcher = create_container(get_settings()).dispatcher
        else:
            dispatcher = build_default_dispatcher()
        dispatcher.track(args.name, args.payload)
    except TrackingException as e:
        print(f"tracking failed: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"invalid tracking settings: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
