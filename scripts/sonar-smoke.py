#!/usr/bin/env python3
"""
SteelSeries Sonar - Smoke Tests
Quick validation against a real SteelSeries GG installation.

Sets a low volume on one channel and toggles its mute, then restores the
previous volume, mute state, mode and chat mix. Run before releases to make
sure the client still talks to the current Sonar build.
"""

import argparse
import asyncio
import json
import logging
import sys

from steelseries_sonar import CHANNEL_NAMES, Sonar, SonarError
from steelseries_sonar.const import DEFAULT_STREAMER_SLIDER


class Colors:
    GREEN = "\033[92m"
    RED = "\033[91m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


class SmokeTestSuite:
    """Quick smoke tests for critical functionality."""

    TEST_VOLUME = 0.25  # low on purpose

    def __init__(self, sonar: Sonar, channel: str):
        self.sonar = sonar
        self.channel = channel
        self.results: list[tuple[str, bool]] = []

    def print_header(self, text: str):
        width = 80
        print(f"\n{Colors.CYAN}{'=' * width}{Colors.RESET}")
        print(f"{Colors.BOLD}{text:^{width}}{Colors.RESET}")
        print(f"{Colors.CYAN}{'=' * width}{Colors.RESET}\n")

    def print_success(self, text: str):
        print(f"{Colors.GREEN}✅ {text}{Colors.RESET}")

    def print_failure(self, text: str):
        print(f"{Colors.RED}❌ {text}{Colors.RESET}")

    def print_info(self, text: str):
        print(f"{Colors.BLUE}ℹ️  {text}{Colors.RESET}")

    def print_warning(self, text: str):
        print(f"{Colors.YELLOW}⚠️  {text}{Colors.RESET}")

    async def run_check(self, name: str, coro) -> bool:
        try:
            result = await coro
        except SonarError as err:
            self.print_failure(f"{name}: {err}")
            self.results.append((name, False))
            return False
        self.print_success(name)
        if result not in (None, ""):
            self.print_info(json.dumps(result)[:200])
        self.results.append((name, True))
        return True

    def channel_state(self, tree: dict) -> dict | None:
        """Find ``{"volume", "muted"}`` for the channel in a volume tree."""
        if self.channel == "master":
            node = tree.get("masters", {})
        else:
            node = tree.get("devices", {}).get(self.channel, {})
        if self.sonar.streamer_mode:
            node = node.get("stream", {}).get(DEFAULT_STREAMER_SLIDER, {})
        else:
            node = node.get("classic", {})
        if "volume" in node and "muted" in node:
            return node
        return None

    async def test_mode(self):
        """Test 1: Can we read and re-apply the mode?"""
        self.print_header("MODE")
        try:
            streamer = await self.sonar.is_streamer_mode()
        except SonarError as err:
            self.print_failure(f"Probe mode: {err}")
            self.results.append(("Probe mode", False))
            return
        self.print_success(f"Probe mode ({'streamer' if streamer else 'classic'})")
        self.results.append(("Probe mode", True))
        if streamer != self.sonar.streamer_mode:
            self.print_warning("Server mode differs from the requested one, following the server")
        # re-applies what the server reported, never the --streamer override
        await self.run_check("Re-apply mode", self.sonar.set_streamer_mode(streamer))

    async def test_volume_and_mute(self):
        """Test 2: Can we set volume and mute, then put them back?"""
        self.print_header("VOLUME & MUTE")
        try:
            tree = await self.sonar.get_volume_data()
        except SonarError as err:
            self.print_failure(f"Read volume tree: {err}")
            self.results.append(("Read volume tree", False))
            return
        self.print_success("Read volume tree")
        self.results.append(("Read volume tree", True))

        state = self.channel_state(tree)
        if state is None:
            self.print_warning(f"No current state for {self.channel}, leaving it untouched")
            return
        volume, muted = state["volume"], bool(state["muted"])
        self.print_info(f"{self.channel}: volume {volume}, muted {muted}")

        await self.run_check(
            f"Set {self.channel} to {self.TEST_VOLUME}",
            self.sonar.set_volume(self.channel, self.TEST_VOLUME),
        )
        await self.run_check(f"Toggle {self.channel} mute", self.sonar.mute_channel(self.channel, not muted))
        await asyncio.sleep(1)
        await self.run_check(f"Restore {self.channel} mute", self.sonar.mute_channel(self.channel, muted))
        await self.run_check(f"Restore {self.channel} volume", self.sonar.set_volume(self.channel, volume))

    async def test_chat_mix(self):
        """Test 3: Can we read and restore the chat mix?"""
        self.print_header("CHAT MIX")
        try:
            original = (await self.sonar.get_chat_mix_model()).balance
        except SonarError as err:
            self.print_failure(f"Read chat mix: {err}")
            self.results.append(("Read chat mix", False))
            return
        self.print_success(f"Read chat mix ({original})")
        self.results.append(("Read chat mix", True))
        await self.run_check("Restore chat mix", self.sonar.set_chat_mix(original))

    async def run(self) -> int:
        await self.test_mode()
        await self.test_volume_and_mute()
        await self.test_chat_mix()

        passed = sum(1 for _, ok in self.results if ok)
        self.print_header(f"RESULTS: {passed}/{len(self.results)} passed")
        return 0 if passed == len(self.results) else 1


async def main() -> int:
    parser = argparse.ArgumentParser(description="SteelSeries Sonar smoke tests")
    parser.add_argument("--config", help="Path to coreProps.json (default: platform location)")
    parser.add_argument("--channel", default="media", choices=CHANNEL_NAMES, help="Channel to exercise")
    parser.add_argument("--streamer", action="store_true", help="Start in streamer mode instead of probing")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        sonar = await Sonar.create(args.config, streamer_mode=True if args.streamer else None)
    except SonarError as err:
        print(f"{Colors.RED}❌ Could not connect to Sonar: {err}{Colors.RESET}")
        return 1

    async with sonar:
        print(f"{Colors.GREEN}✅ Connected to {sonar.web_server_address}{Colors.RESET}")
        return await SmokeTestSuite(sonar, args.channel).run()


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
