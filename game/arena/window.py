"""
Arcade window: keyboard input, menu keys, rendering, and the audio cue sink
"""

from __future__ import annotations
from typing import Iterable, Set

import arcade
from arcade.types import XYWH
from loguru import logger

from .config import ARENA_SIZE, DIFFICULTY_MODES, PLAYER_COLOR
from .entities import AudioCue, AreaTrap, BigProjectile, HomingProjectile, SlashHazard
from .session import GameSession, SessionState
from .simulation import InputSnapshot


MODE_KEYS = {
    arcade.key.KEY_1: "easy",
    arcade.key.KEY_2: "normal",
    arcade.key.KEY_3: "hard",
    arcade.key.KEY_4: "insane",
}
LEFT_KEYS = {arcade.key.LEFT, arcade.key.A}
RIGHT_KEYS = {arcade.key.RIGHT, arcade.key.D}
UP_KEYS = {arcade.key.UP, arcade.key.W}
DOWN_KEYS = {arcade.key.DOWN, arcade.key.S}


def keys_to_snapshot(held: Set[int]) -> InputSnapshot:
    return InputSnapshot(
        left=bool(held & LEFT_KEYS),
        right=bool(held & RIGHT_KEYS),
        up=bool(held & UP_KEYS),
        down=bool(held & DOWN_KEYS),
    )


def with_alpha(color, alpha: float):
    return color[0], color[1], color[2], int(255 * max(0.0, min(1.0, alpha)))


class ArenaWindow(arcade.Window):
    """Arcade window rendering a GameSession.

    With ``interactive=True`` the window also owns the frame clock and the
    keyboard; otherwise something else (DodgeEnv) advances the session and
    the window only draws.
    """

    def __init__(self, session: GameSession, interactive: bool = True):
        super().__init__(ARENA_SIZE, ARENA_SIZE, "Dodge Arena")
        self.session = session
        self.interactive = interactive
        self._held: Set[int] = set()
        self._clock_ms = 0.0

        self.BG = (10, 10, 20)
        self.HUD_C = (220, 220, 220)
        self.DIM_C = (140, 140, 160)

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if not self.interactive:
            return
        self._held.add(symbol)
        state = self.session.state

        if state is SessionState.MENU:
            if symbol in MODE_KEYS:
                self.session.select_mode(MODE_KEYS[symbol])
            elif symbol == arcade.key.ENTER:
                self.session.start(self.session.mode.key, self._clock_ms)
        elif state is SessionState.GAMEOVER:
            if symbol in (arcade.key.ENTER, arcade.key.R):
                self.session.restart(self._clock_ms)
            elif symbol in (arcade.key.M, arcade.key.ESCAPE):
                self.session.main_menu()

    def on_key_release(self, symbol: int, modifiers: int):
        self._held.discard(symbol)

    # ----------------------------
    # Frame
    # ----------------------------

    def on_update(self, delta_time: float):
        self._clock_ms += delta_time * 1000
        if not self.interactive or not self.session.is_running:
            return
        cues = self.session.advance(self._clock_ms, keys_to_snapshot(self._held))
        self.play_cues(cues)

    def play_cues(self, cues: Iterable[AudioCue]):
        # No synthesizer attached; cues are fire-and-forget
        for cue in cues:
            logger.debug("cue {:.0f}Hz {:.2f}s {}", cue.frequency, cue.duration, cue.waveform)

    # ----------------------------
    # Drawing
    # ----------------------------

    @staticmethod
    def _sy(y: float) -> float:
        """Simulation y grows downwards, arcade's grows upwards"""
        return ARENA_SIZE - y

    def on_draw(self):
        self.clear(color=self.BG)
        state = self.session.state
        if state is SessionState.MENU:
            self._draw_menu()
            return

        for hazard in self.session.hazards:
            self._draw_hazard(hazard)
        for p in self.session.particles:
            arcade.draw_circle_filled(p.x, self._sy(p.y), p.size, with_alpha(p.color, p.life))
        if state is SessionState.PLAYING:
            self._draw_player()
        self._draw_hud()

        if state is SessionState.GAMEOVER:
            self._draw_game_over()

    def _draw_hazard(self, h):
        if isinstance(h, SlashHazard):
            color = h.color if not h.warning else with_alpha(h.color, 0.6)
            if h.rotation:
                rect = XYWH(h.x, self._sy(h.y), h.width, h.height)
                if h.warning:
                    arcade.draw_rect_outline(rect, color, 4, h.rotation)
                else:
                    arcade.draw_rect_filled(rect, color, h.rotation)
            else:
                bottom = self._sy(h.y + h.height)
                if h.warning:
                    arcade.draw_lbwh_rectangle_outline(h.x, bottom, h.width, h.height, color, 4)
                else:
                    arcade.draw_lbwh_rectangle_filled(h.x, bottom, h.width, h.height, h.color)
        elif isinstance(h, HomingProjectile):
            if len(h.trail) > 1:
                points = [(x, self._sy(y)) for x, y in h.trail]
                arcade.draw_line_strip(points, with_alpha(h.color, 0.27), h.radius)
            arcade.draw_circle_filled(h.x, self._sy(h.y), h.radius, h.color)
        elif isinstance(h, BigProjectile):
            arcade.draw_circle_filled(h.x, self._sy(h.y), h.radius, h.color)
        elif isinstance(h, AreaTrap):
            bottom = self._sy(h.y + h.size)
            if h.active:
                arcade.draw_lbwh_rectangle_filled(h.x, bottom, h.size, h.size, h.color)
            else:
                arcade.draw_lbwh_rectangle_outline(h.x, bottom, h.size, h.size,
                                                   with_alpha(h.color, 0.53), 3)

    def _draw_player(self):
        p = self.session.player
        x, y, s = p.x, self._sy(p.y), p.half
        arcade.draw_triangle_filled(x, y + s, x + s, y - s, x - s, y - s, PLAYER_COLOR)

    def _draw_hud(self):
        s = self.session
        txt = (f"TIME: {s.score}s  LEVEL: {s.difficulty_level}  "
               f"{s.mode.name}  BEST: {s.best_score}s")
        arcade.draw_text(txt, 12, self.height - 28, self.HUD_C, 14)

    def _draw_menu(self):
        cx = self.width / 2
        arcade.draw_text("DODGE ARENA", cx, self.height * 0.7, (0, 255, 255), 40, anchor_x="center")
        arcade.draw_text("Survive the neon onslaught", cx, self.height * 0.7 - 40,
                         self.DIM_C, 14, anchor_x="center")
        for i, (key, mode) in enumerate(DIFFICULTY_MODES.items()):
            marker = ">" if mode is self.session.mode else " "
            best = self.session.high_scores.best(key) if self.session.high_scores else 0
            arcade.draw_text(f"{marker} {i + 1}. {mode.name:<7} best {best}s", cx,
                             self.height * 0.5 - i * 28, mode.color, 16, anchor_x="center")
        arcade.draw_text("1-4 select mode, ENTER to start, WASD / arrows to move", cx,
                         self.height * 0.2, self.DIM_C, 12, anchor_x="center")

    def _draw_game_over(self):
        s = self.session
        cx = self.width / 2
        arcade.draw_text("GAME OVER", cx, self.height * 0.6, (255, 0, 255), 40, anchor_x="center")
        arcade.draw_text(f"{s.mode.name} MODE  SURVIVED: {s.score}s  BEST: {s.best_score}s",
                         cx, self.height * 0.6 - 44, s.mode.color, 16, anchor_x="center")
        arcade.draw_text("ENTER / R to play again, M for main menu", cx,
                         self.height * 0.6 - 80, self.DIM_C, 12, anchor_x="center")
