"""CLI entry point for the heating control panel."""

import argparse
import logging
import os
import sys

from heatpanel.config.loader import get_config_value, load_config, save_config, set_config_value
from heatpanel.config.schema import PanelConfig
from heatpanel.ingest.address_client import AddressClient
from heatpanel.ingest.profile_adapter import ProfileFormatError
from heatpanel.ingest.profile_client import ProfileClient
from heatpanel.ingest.status_client import StatusClient
from heatpanel.ingest.transport import AuthenticatedTransport, TransportError, env_token_provider
from heatpanel.models.edit import ChunkEdit, ChunkEditError
from heatpanel.models.status import BoostType
from heatpanel.reporting.formatters import (
    format_chunks_json,
    format_chunks_text,
    format_profile_detail,
    format_profile_summary,
    format_status_text,
)
from heatpanel.schedule.priorities import build_priority_payload, move_profile, split_default
from heatpanel.session import ProfileEditSession, ProfileSaveError

DEFAULT_CONFIG = "heatpanel.yaml"
PROFILE_COMMANDS = ("list", "show", "edit", "delete-chunk", "move")


def build_transport(config: PanelConfig) -> AuthenticatedTransport:
    return AuthenticatedTransport(
        env_token_provider(config.auth.token_env_var),
        timeout=config.api.timeout_seconds,
        max_retries=config.api.max_retries,
        retry_base_delay=config.api.retry_base_delay,
    )


def build_status_client(config: PanelConfig) -> StatusClient:
    return StatusClient(
        build_transport(config),
        status_url=config.api.status_url,
        boost_url=config.api.boost_url,
    )


def build_profile_client(config: PanelConfig) -> ProfileClient:
    return ProfileClient(
        build_transport(config),
        list_url=config.api.profile_list_url,
        save_url=config.api.profile_save_url,
        delete_url=config.api.profile_delete_url,
        priority_url=config.api.priority_update_url,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="heatpanel",
        description="Heating and hot water control panel",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="Config YAML path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # status / boost
    sub.add_parser("status", help="Show live heating and hot water status")
    boost_p = sub.add_parser("boost", help="Toggle a boost (repeat to cancel)")
    boost_p.add_argument("kind", choices=["heating", "water"])

    # profiles
    profiles_p = sub.add_parser("profiles", help="Temperature profile operations")
    profiles_sub = profiles_p.add_subparsers(dest="profiles_command")
    profiles_sub.add_parser("list", help="List profiles by priority")
    show_p = profiles_sub.add_parser("show", help="Show a profile's chunks")
    show_p.add_argument("key")
    show_p.add_argument("--json", action="store_true", help="Chunks as JSON")

    edit_p = profiles_sub.add_parser("edit", help="Set a band over a time range")
    edit_p.add_argument("key")
    edit_p.add_argument("--start", required=True, help="HH:MM, inclusive")
    edit_p.add_argument("--end", required=True, help="HH:MM, exclusive; 00:00 = end of day")
    edit_p.add_argument("--low", type=float, required=True)
    edit_p.add_argument("--high", type=float, required=True)
    edit_p.add_argument("--chunk", type=int, default=None, help="Index of the chunk being edited")
    edit_p.add_argument("--save", action="store_true", help="Save to the profile store")

    del_p = profiles_sub.add_parser("delete-chunk", help="Merge a chunk into the one before it")
    del_p.add_argument("key")
    del_p.add_argument("index", type=int)
    del_p.add_argument("--save", action="store_true", help="Save to the profile store")

    move_p = profiles_sub.add_parser("move", help="Move a profile to another's priority slot")
    move_p.add_argument("key")
    move_p.add_argument("target_key")

    # address lookup
    addr_p = sub.add_parser("address", help="Autocomplete a property address")
    addr_p.add_argument("term")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    try:
        if args.command == "status":
            return _cmd_status(config)
        elif args.command == "boost":
            return _cmd_boost(config, args)
        elif args.command == "profiles":
            return _cmd_profiles(config, args)
        elif args.command == "address":
            return _cmd_address(config, args)
        elif args.command == "config":
            return _cmd_config(config, args)
    except (TransportError, ProfileFormatError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    parser.print_help()
    return 1


def _cmd_status(config: PanelConfig) -> int:
    status = build_status_client(config).get_status()
    print(format_status_text(status))
    return 0


def _cmd_boost(config: PanelConfig, args) -> int:
    client = build_status_client(config)
    current = client.get_status().boost_type
    requested = BoostType.HEATING if args.kind == "heating" else BoostType.WATER
    new_state = client.toggle_boost(current, requested)
    print(f"Boost: {'off' if new_state == BoostType.NONE else args.kind}")
    return 0


def _cmd_profiles(config: PanelConfig, args) -> int:
    if args.profiles_command not in PROFILE_COMMANDS:
        print(f"Use: profiles {' | '.join(PROFILE_COMMANDS)}")
        return 1

    client = build_profile_client(config)
    profiles = client.list_profiles()

    if args.profiles_command == "list":
        default, others = split_default(profiles.values())
        for p in others:
            print(format_profile_summary(p))
        if default is not None:
            print(format_profile_summary(default))
        return 0

    if args.key not in profiles:
        print(f"Error: no profile {args.key}")
        return 1
    profile = profiles[args.key]

    if args.profiles_command == "show":
        if args.json:
            session = ProfileEditSession(profile, profiles)
            print(format_chunks_json(session.chunks()))
        else:
            print(format_profile_detail(profile))
        return 0

    if args.profiles_command == "move":
        _, others = split_default(profiles.values())
        try:
            reordered = move_profile(others, args.key, args.target_key)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        client.update_priorities(build_priority_payload(reordered))
        for p in reordered:
            print(format_profile_summary(p))
        return 0

    session = ProfileEditSession(
        profile, profiles, min_band_width=config.editor.min_band_width
    )
    try:
        if args.profiles_command == "edit":
            session.submit_edit(
                ChunkEdit(args.start, args.end, args.low, args.high, chunk_index=args.chunk)
            )
        elif not session.delete_chunk(args.index):
            print("Nothing changed: the first chunk has no earlier chunk to merge into")
            return 1
    except (ChunkEditError, IndexError) as e:
        print(f"Error: {e}")
        return 1

    print(format_chunks_text(session.chunks()))
    if args.save and session.has_changes:
        try:
            client.save_profile(session.save_payload())
        except ProfileSaveError as e:
            print(f"Error: {e}")
            return 1
        print("Profile saved")
    return 0


def _cmd_address(config: PanelConfig, args) -> int:
    client = AddressClient(
        api_key=os.environ.get(config.address.api_key_env_var, ""),
        base_url=config.address.base_url,
        min_term_length=config.address.min_term_length,
    )
    for address in client.autocomplete(args.term):
        print(address)
    return 0


def _cmd_config(config: PanelConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except Exception as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config set key=value")
        return 1


if __name__ == "__main__":
    sys.exit(main())
