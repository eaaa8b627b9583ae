"""
game.py - pygame shell: window, main loop, input routing
One simulation tick and one draw pass per frame.
"""

import logging
import os

import pygame

from .config import Config, ProgressStore
from .progression import Progression
from .session import SessionController, GameState
from .settings import TITLE, NOTICE_DURATION, UPGRADES
from .sound import SoundBank
from .ui import UI

logger = logging.getLogger(__name__)

_SHOP_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
}


class Game:
    """Binds pygame events and drawing to a SessionController."""

    def __init__(self, config=None, store=None):
        os.environ['SDL_VIDEO_CENTERED'] = '1'

        pygame.init()
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio init failed: %s", exc)

        self.config = config or Config()
        self.screen = self._set_mode(self.config.display_width, self.config.display_height)
        pygame.display.set_caption(TITLE)

        self.clock = pygame.time.Clock()
        self.running = True
        self.time = 0.0

        w, h = self.screen.get_size()
        self.ui = UI(w, h)
        self.sounds = SoundBank(self.config.sfx_volume)
        self.session = SessionController(Progression(store or ProgressStore()), w, h)

        self.notices = []         # [text, seconds_left]
        self.daily_popup = None   # (reward, streak_text)

        self.session.claim_daily_reward()
        logger.info("Started with %r", self.config)

    def _set_mode(self, w, h):
        if self.config.fullscreen:
            flags = pygame.FULLSCREEN
        else:
            flags = pygame.RESIZABLE
        vsync_flag = 1 if self.config.vsync else 0
        try:
            return pygame.display.set_mode((w, h), flags, vsync=vsync_flag)
        except pygame.error:
            # vsync is not available on every renderer
            return pygame.display.set_mode((w, h), flags)

    # ── Main Loop ────────────────────────────────────────

    def run(self):
        while self.running:
            dt = self.clock.tick(self.config.fps) / 1000.0
            self.time += dt

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                self._handle_event(event)

            if not self.running:
                break
            self._update(dt)
            self._draw(self.screen)
            pygame.display.flip()

        pygame.quit()

    def _update(self, dt):
        if self.daily_popup is None:
            self.session.tick()
        self._consume_events()

        for notice in self.notices:
            notice[1] -= dt
        self.notices = [n for n in self.notices if n[1] > 0]

    def _consume_events(self):
        for event in self.session.drain_events():
            if event.kind == "notice":
                self.notices.append([event.text, NOTICE_DURATION])
            elif event.kind == "daily_reward":
                self.daily_popup = (event.amount, event.text)
            elif event.kind == "game_over":
                logger.info("Final score %d", event.amount)
            self.sounds.play(event.kind)

    # ── Event Handling ───────────────────────────────────

    def _handle_event(self, event):
        if event.type == pygame.VIDEORESIZE:
            self.screen = self._set_mode(event.w, event.h)
            w, h = self.screen.get_size()
            self.ui.resize(w, h)
            self.session.resize(w, h)
            return

        if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
            self._toggle_fullscreen()
            return

        if event.type == pygame.MOUSEMOTION:
            self.session.set_pointer(event.pos[0])
            return
        if event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            # Finger coordinates are normalized to [0, 1]
            self.session.set_pointer(event.x * self.ui.W)
            return

        if self.daily_popup is not None:
            if event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_SPACE):
                self.daily_popup = None
            elif (event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
                  and self.ui.collect_rect.collidepoint(event.pos)):
                self.daily_popup = None
            return

        if event.type == pygame.KEYDOWN:
            self._handle_key(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._handle_click(event.pos)

    def _toggle_fullscreen(self):
        """Switch screen mode and remember the choice in settings.json."""
        self.config.screen_mode = "windowed" if self.config.fullscreen else "fullscreen"
        self.config.save()
        self.screen = self._set_mode(self.config.display_width, self.config.display_height)
        w, h = self.screen.get_size()
        self.ui.resize(w, h)
        self.session.resize(w, h)
        logger.info("Screen mode %s at %s", self.config.screen_mode,
                    self.config.resolution_label())

    def _handle_key(self, key):
        session = self.session
        if session.shop_open:
            if key in (pygame.K_ESCAPE, pygame.K_s):
                session.close_shop()
            elif key in _SHOP_KEYS:
                session.buy_upgrade(list(UPGRADES)[_SHOP_KEYS[key]])
            return

        if session.state == GameState.START:
            if key == pygame.K_RETURN:
                session.start()
            elif key == pygame.K_s:
                session.open_shop()
            elif key == pygame.K_ESCAPE:
                self.running = False
        elif session.state == GameState.GAME_OVER:
            if key in (pygame.K_r, pygame.K_RETURN):
                session.restart()
            elif key == pygame.K_s:
                session.open_shop()
            elif key == pygame.K_ESCAPE:
                self.running = False

    def _handle_click(self, pos):
        session = self.session
        if session.shop_open:
            choice = self.ui.get_shop_click(pos)
            if choice:
                session.buy_upgrade(choice)
            elif self.ui.close_shop_rect.collidepoint(pos):
                session.close_shop()
            return

        if session.state == GameState.START:
            if self.ui.start_rect.collidepoint(pos):
                session.start()
            elif self.ui.shop_rect.collidepoint(pos):
                session.open_shop()
        elif session.state == GameState.GAME_OVER:
            if self.ui.restart_rect.collidepoint(pos):
                session.restart()
            elif self.ui.shop_rect.collidepoint(pos):
                session.open_shop()

    # ── Drawing ──────────────────────────────────────────

    def _draw(self, surface):
        session = self.session
        progression = session.progression

        self.ui.draw_world(surface, session.simulation)
        self.ui.draw_hud(surface, session.simulation, progression.coins,
                         progression.state.high_score)

        if session.shop_open:
            self.ui.draw_shop(surface, progression)
        elif session.state == GameState.START:
            self.ui.draw_start_screen(surface, progression, self.time)
        elif session.state == GameState.GAME_OVER:
            self.ui.draw_game_over(surface, session.summary)

        if self.daily_popup is not None:
            self.ui.draw_daily_popup(surface, *self.daily_popup)

        self.ui.draw_notifications(surface, self.notices)
