"""
ui.py - World, HUD, shop, start and game-over rendering
Pure draw pass: reads simulation and progression state, never mutates it.
Clickable button rects are recorded during draw for hit-testing.
"""

import math

import pygame

from .settings import (
    BG_COLOR, GROUND_COLOR, WHITE, BLACK, GRAY, DARK_GRAY, GOLD,
    CANNON_BODY, CANNON_BARREL, CANNON_WHEEL, UI_BG, UI_BORDER,
    POWERUP_TYPES, PARTICLE_LIFETIME, UPGRADES, BLOCK_COLOR_MAX,
)


class UI:
    """Handles all rendering at the current window size."""

    def __init__(self, screen_width=1280, screen_height=720):
        pygame.font.init()
        self.resize(screen_width, screen_height)

        # Button rects (set during draw)
        self.start_rect = pygame.Rect(0, 0, 0, 0)
        self.shop_rect = pygame.Rect(0, 0, 0, 0)
        self.restart_rect = pygame.Rect(0, 0, 0, 0)
        self.close_shop_rect = pygame.Rect(0, 0, 0, 0)
        self.collect_rect = pygame.Rect(0, 0, 0, 0)
        self.shop_rects = []

    def resize(self, screen_width, screen_height):
        self.W = screen_width
        self.H = screen_height
        self.scale = max(0.5, screen_width / 1280)
        self._create_fonts()

    def _create_fonts(self):
        """Create fonts scaled to the current resolution."""
        s = self.scale
        self.font_title = pygame.font.Font(None, max(24, int(96 * s)))
        self.font_large = pygame.font.Font(None, max(18, int(56 * s)))
        self.font_medium = pygame.font.Font(None, max(14, int(36 * s)))
        self.font_small = pygame.font.Font(None, max(12, int(26 * s)))
        self.font_block = pygame.font.Font(None, 24)

    def _s(self, pixels):
        """Scale a base-720p pixel value to current resolution."""
        return max(1, int(pixels * self.scale))

    # ── World ────────────────────────────────────────────

    def draw_world(self, surface, sim):
        surface.fill(BG_COLOR)
        pygame.draw.rect(surface, GROUND_COLOR,
                         (0, int(sim.ground_y), self.W, max(0, self.H - int(sim.ground_y))))

        for block in sim.blocks:
            rect = pygame.Rect(int(block.x), int(block.y), int(block.width), int(block.height))
            pygame.draw.rect(surface, block.color, rect, border_radius=10)
            label = self.font_block.render(str(block.hp), True, WHITE)
            surface.blit(label, label.get_rect(center=rect.center))

        self._draw_cannon(surface, sim.cannon)

        for ball in sim.balls:
            pygame.draw.circle(surface, ball.color, (int(ball.x), int(ball.y)), int(ball.radius))

        for p in sim.particles:
            alpha = int(255 * max(0, p.life) / PARTICLE_LIFETIME)
            r = max(1, int(p.radius))
            spark = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
            pygame.draw.circle(spark, (*p.color, alpha), (r, r), r)
            surface.blit(spark, (int(p.x) - r, int(p.y) - r))

        for pu in sim.powerups:
            info = POWERUP_TYPES.get(pu.kind, {"color": GOLD, "icon": "?"})
            center = (int(pu.x), int(pu.y))
            pygame.draw.circle(surface, info["color"], center, int(pu.radius))
            icon = self.font_block.render(info["icon"], True, BLACK)
            surface.blit(icon, icon.get_rect(center=center))

        for popup in sim.coin_popups:
            text = self.font_medium.render(f"+{popup.amount}", True, GOLD)
            text.set_alpha(int(255 * max(0.0, min(1.0, popup.life))))
            surface.blit(text, text.get_rect(topright=(int(popup.x), int(popup.y))))

    def _draw_cannon(self, surface, cannon):
        cx, cy = int(cannon.x), int(cannon.y)
        body = [(cx - 30, cy + 20), (cx - 25, cy - 20), (cx + 25, cy - 20), (cx + 30, cy + 20)]
        pygame.draw.polygon(surface, CANNON_BODY, body)
        pygame.draw.rect(surface, CANNON_BARREL, (cx - 8, cy - 40, 16, 25))
        pygame.draw.circle(surface, CANNON_WHEEL, (cx - 20, cy + 20), 12)
        pygame.draw.circle(surface, CANNON_WHEEL, (cx + 20, cy + 20), 12)

    # ── HUD ──────────────────────────────────────────────

    def draw_hud(self, surface, sim, coins, best):
        s = self._s
        score = self.font_large.render(str(sim.score), True, WHITE)
        surface.blit(score, score.get_rect(midtop=(self.W // 2, s(16))))

        level = self.font_small.render(f"Level {sim.level}", True, GRAY)
        surface.blit(level, level.get_rect(midtop=(self.W // 2, s(64))))

        best_text = self.font_small.render(f"Best: {best}", True, GRAY)
        surface.blit(best_text, (s(20), s(20)))

        coin_text = self.font_medium.render(f"$ {coins}", True, GOLD)
        surface.blit(coin_text, coin_text.get_rect(topright=(self.W - s(20), s(16))))

    # ── Screens ──────────────────────────────────────────

    def _overlay(self, surface, alpha=190):
        overlay = pygame.Surface((self.W, self.H), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        surface.blit(overlay, (0, 0))

    def _draw_button(self, surface, label, rect, hovered, accent):
        if hovered:
            bg = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
            bg.fill((*accent, 50))
            surface.blit(bg, rect.topleft)
        pygame.draw.rect(surface, accent if hovered else GRAY, rect,
                         max(1, self._s(2)), border_radius=self._s(8))
        text = self.font_medium.render(label, True, WHITE if hovered else GRAY)
        surface.blit(text, text.get_rect(center=rect.center))

    def _button_column(self, labels, top):
        s = self._s
        w, h = s(280), s(52)
        x = (self.W - w) // 2
        return [pygame.Rect(x, top + i * s(68), w, h) for i in range(len(labels))]

    def draw_start_screen(self, surface, progression, time):
        s = self._s
        self._overlay(surface, 170)

        bob = int(math.sin(time * 2) * s(6))
        title = self.font_title.render("BALL BLAST", True, UI_BORDER)
        surface.blit(title, title.get_rect(center=(self.W // 2, s(170) + bob)))

        state = progression.state
        stats = self.font_small.render(
            f"Best: {state.high_score}   Best level: {state.best_level}   Coins: {state.coins}",
            True, GRAY)
        surface.blit(stats, stats.get_rect(center=(self.W // 2, s(250))))

        mouse = pygame.mouse.get_pos()
        self.start_rect, self.shop_rect = self._button_column(("PLAY", "SHOP"), s(310))
        self._draw_button(surface, "PLAY", self.start_rect,
                          self.start_rect.collidepoint(mouse), UI_BORDER)
        self._draw_button(surface, "SHOP", self.shop_rect,
                          self.shop_rect.collidepoint(mouse), GOLD)

        hint = self.font_small.render("Move the mouse or drag to aim  |  [ENTER] Play  |  "
                                      "[S] Shop  |  [F11] Fullscreen", True, GRAY)
        surface.blit(hint, hint.get_rect(center=(self.W // 2, s(480))))

    def draw_game_over(self, surface, summary):
        s = self._s
        self._overlay(surface)

        title = self.font_title.render("GAME OVER", True, BLOCK_COLOR_MAX)
        surface.blit(title, title.get_rect(center=(self.W // 2, s(160))))

        lines = [
            (f"Score: {summary['score']}", WHITE),
            (f"Best: {summary['best']}", GRAY),
            (f"Level {summary['level']}", GRAY),
            (f"+{summary['session_coins']} coins", GOLD),
        ]
        for i, (line, color) in enumerate(lines):
            text = self.font_medium.render(line, True, color)
            surface.blit(text, text.get_rect(center=(self.W // 2, s(240) + i * s(40))))

        mouse = pygame.mouse.get_pos()
        self.restart_rect, self.shop_rect = self._button_column(("RESTART", "SHOP"), s(420))
        self._draw_button(surface, "RESTART", self.restart_rect,
                          self.restart_rect.collidepoint(mouse), UI_BORDER)
        self._draw_button(surface, "SHOP", self.shop_rect,
                          self.shop_rect.collidepoint(mouse), GOLD)

    def draw_shop(self, surface, progression):
        W = self.W
        s = self._s
        self._overlay(surface, 220)

        title = self.font_large.render("UPGRADES", True, GOLD)
        surface.blit(title, title.get_rect(center=(W // 2, s(70))))
        coins = self.font_medium.render(f"$ {progression.coins}", True, GOLD)
        surface.blit(coins, coins.get_rect(center=(W // 2, s(115))))

        self.shop_rects = []
        card_w, card_h, gap = s(260), s(220), s(24)
        keys = list(UPGRADES)
        total_w = len(keys) * card_w + (len(keys) - 1) * gap
        start_x = (W - total_w) // 2
        card_y = s(160)
        mouse = pygame.mouse.get_pos()

        for i, key in enumerate(keys):
            upgrade = UPGRADES[key]
            rect = pygame.Rect(start_x + i * (card_w + gap), card_y, card_w, card_h)
            self.shop_rects.append((rect, key))
            hovered = rect.collidepoint(mouse)

            card = pygame.Surface((card_w, card_h), pygame.SRCALPHA)
            card.fill(UI_BG)
            surface.blit(card, rect.topleft)
            pygame.draw.rect(surface, UI_BORDER if hovered else DARK_GRAY, rect,
                             max(1, s(2)), border_radius=s(8))

            tier = progression.tier(key)
            maxed = progression.is_maxed(key)
            rows = [
                (f"[{i + 1}] {upgrade['name']}", self.font_medium, WHITE),
                (upgrade["desc"], self.font_small, GRAY),
                (f"Lv. {tier}/{upgrade['max_level']}", self.font_small, WHITE),
                ("MAXED" if maxed else f"{progression.upgrade_price(key)} coins",
                 self.font_medium, GRAY if maxed else GOLD),
            ]
            for j, (text, font, color) in enumerate(rows):
                img = font.render(text, True, color)
                surface.blit(img, img.get_rect(center=(rect.centerx, rect.top + s(35) + j * s(48))))

            # Tier bar
            bar = pygame.Rect(rect.left + s(20), rect.bottom - s(22), card_w - s(40), s(8))
            pygame.draw.rect(surface, DARK_GRAY, bar, border_radius=s(3))
            fill_w = int(bar.width * tier / upgrade["max_level"])
            if fill_w > 0:
                pygame.draw.rect(surface, UI_BORDER, (bar.x, bar.y, fill_w, bar.height),
                                 border_radius=s(3))

        self.close_shop_rect = self._button_column(("CLOSE",), card_y + card_h + s(40))[0]
        self._draw_button(surface, "CLOSE", self.close_shop_rect,
                          self.close_shop_rect.collidepoint(mouse), UI_BORDER)

    def draw_daily_popup(self, surface, reward, streak_text):
        s = self._s
        self._overlay(surface, 160)
        box = pygame.Rect(0, 0, s(420), s(260))
        box.center = (self.W // 2, self.H // 2)
        pygame.draw.rect(surface, BG_COLOR, box, border_radius=s(12))
        pygame.draw.rect(surface, GOLD, box, max(1, s(3)), border_radius=s(12))

        for i, (text, font, color) in enumerate([
            ("DAILY REWARD!", self.font_large, GOLD),
            (streak_text, self.font_small, WHITE),
            (f"+{reward} coins", self.font_medium, GOLD),
        ]):
            img = font.render(text, True, color)
            surface.blit(img, img.get_rect(center=(box.centerx, box.top + s(45) + i * s(50))))

        self.collect_rect = pygame.Rect(0, 0, s(200), s(44))
        self.collect_rect.midbottom = (box.centerx, box.bottom - s(20))
        self._draw_button(surface, "COLLECT", self.collect_rect,
                          self.collect_rect.collidepoint(pygame.mouse.get_pos()), GOLD)

    def draw_notifications(self, surface, notices):
        """notices: list of [text, seconds_left]; newest last."""
        s = self._s
        for i, (text, left) in enumerate(reversed(notices[-4:])):
            img = self.font_medium.render(text, True, WHITE)
            img.set_alpha(int(255 * max(0.0, min(1.0, left))))
            rect = img.get_rect(center=(self.W // 2, self.H // 3 + i * s(40)))
            bg = pygame.Surface((rect.width + s(24), rect.height + s(12)), pygame.SRCALPHA)
            bg.fill(UI_BG)
            surface.blit(bg, (rect.x - s(12), rect.y - s(6)))
            surface.blit(img, rect)

    # ── Hit-testing ──────────────────────────────────────

    def get_shop_click(self, pos):
        for rect, key in self.shop_rects:
            if rect.collidepoint(pos):
                return key
        return None
