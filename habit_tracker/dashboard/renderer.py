"""Dashboard image renderer."""

import logging
from datetime import datetime
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from habit_tracker.habits.models import Habit, TodayStatus

logger = logging.getLogger(__name__)


class DashboardRenderer:
    """Renders today's habit status to an image."""

    def __init__(self, output_dir: str = "static/images", keep: int = 5):
        """
        Initialize renderer.

        Args:
            output_dir: Directory to save generated images
            keep: Number of most recent renders to keep on disk
        """
        self.output_dir = Path(output_dir)
        self.keep = max(keep, 1)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        self.fonts = self._load_fonts()

    def _load_fonts(self) -> dict:
        """Load fonts for rendering."""
        fonts = {}

        font_paths = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
            "/System/Library/Fonts/Helvetica.ttc",  # macOS
        ]

        try:
            for path in font_paths:
                if Path(path).exists():
                    fonts["header"] = ImageFont.truetype(path, 24)
                    fonts["title"] = ImageFont.truetype(path, 20)
                    fonts["normal"] = ImageFont.truetype(path, 16)
                    fonts["small"] = ImageFont.truetype(path, 14)
                    logger.info(f"Loaded fonts from {path}")
                    break
        except OSError as e:
            logger.warning(f"Could not load TrueType fonts: {e}, using default")
            fonts = {}

        if not fonts:
            default_font = ImageFont.load_default()
            for key in ("header", "title", "normal", "small"):
                fonts[key] = default_font

        return fonts

    def render(
        self,
        status: TodayStatus,
        habits: list[Habit],
        width: int = 800,
        height: int = 480,
    ) -> tuple[str, str]:
        """
        Render the dashboard.

        Args:
            status: Today's status from the tracker
            habits: Habits in tracker order (same order as status rows)
            width: Image width
            height: Image height

        Returns:
            Tuple of (filename, file_path)
        """
        logger.info(f"Rendering dashboard with {len(habits)} habits")

        image = Image.new("RGB", (width, height), "white")
        draw = ImageDraw.Draw(image)

        self._draw_header(draw, status, width)
        self._draw_habits(draw, status, habits, width, height)
        self._draw_footer(draw, status, width, height)

        image = image.convert("1")

        timestamp = datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        filename = f"dashboard-{timestamp}"
        file_path = self.output_dir / f"{filename}.png"

        image.save(file_path, "PNG")
        logger.info(f"Saved dashboard to {file_path}")
        self._prune_old_renders()

        return filename, str(file_path)

    def _prune_old_renders(self):
        """Delete all but the newest `keep` dashboard images."""
        # Timestamped names sort chronologically
        renders = sorted(self.output_dir.glob("dashboard-*.png"))
        for old in renders[: -self.keep]:
            old.unlink(missing_ok=True)
            logger.debug(f"Removed old dashboard {old}")

    def _draw_header(self, draw: ImageDraw.ImageDraw, status: TodayStatus, width: int):
        """Draw header with the day."""
        draw.text((20, 15), "Today's Habits", fill="black", font=self.fonts["header"])

        day_text = status.day.strftime("%a %b %d, %Y")
        bbox = draw.textbbox((0, 0), day_text, font=self.fonts["normal"])
        text_width = bbox[2] - bbox[0]
        draw.text((width - text_width - 20, 18), day_text, fill="black", font=self.fonts["normal"])

        draw.line([20, 50, width - 20, 50], fill="black", width=2)

    def _draw_habits(
        self,
        draw: ImageDraw.ImageDraw,
        status: TodayStatus,
        habits: list[Habit],
        width: int,
        height: int,
    ):
        y_offset = 65

        for row, habit in zip(status.habits, habits):
            if y_offset > height - 95:  # Leave room for footer
                logger.debug(f"Dashboard full, skipping from habit #{row.number}")
                break

            self._draw_habit_row(draw, row.completed, habit, y_offset, width)
            y_offset += 60

    def _draw_habit_row(self, draw: ImageDraw.ImageDraw, completed: bool, habit: Habit, y: int, width: int):
        """Draw one habit: checkbox, name, success-rate bar and streak."""
        x_margin = 30
        box = 20

        draw.rectangle(
            [x_margin, y + 2, x_margin + box, y + 2 + box],
            fill="black" if completed else "white",
            outline="black",
            width=2,
        )
        draw.text((x_margin + box + 12, y), habit.name, fill="black", font=self.fonts["title"])

        bar_x = x_margin + box + 12
        bar_y = y + 30
        bar_width = 360
        bar_height = 12
        filled = int(bar_width * habit.success_rate() / 100)

        if filled > 0:
            draw.rectangle([bar_x, bar_y, bar_x + filled, bar_y + bar_height], fill="black")
        draw.rectangle([bar_x, bar_y, bar_x + bar_width, bar_y + bar_height], outline="black", width=1)

        rate_text = f"{habit.success_rate():.0f}%"
        draw.text((bar_x + bar_width + 12, bar_y - 3), rate_text, fill="black", font=self.fonts["small"])

        streak_text = f"Streak: {habit.streak}"
        if habit.is_on_track():
            streak_text += " (on track)"
        bbox = draw.textbbox((0, 0), streak_text, font=self.fonts["normal"])
        streak_width = bbox[2] - bbox[0]
        draw.text((width - streak_width - 30, y + 12), streak_text, fill="black", font=self.fonts["normal"])

    def _draw_footer(self, draw: ImageDraw.ImageDraw, status: TodayStatus, width: int, height: int):
        """Draw footer with overall completion."""
        y = height - 35

        draw.line([20, y - 10, width - 20, y - 10], fill="black", width=2)

        if status.total > 0:
            summary_text = f"Today: {status.completed}/{status.total} ({int(status.percentage)}%)"
        else:
            summary_text = "Today: No habits"
        draw.text((20, y), summary_text, fill="black", font=self.fonts["normal"])

        time_text = f"Last update: {datetime.now().strftime('%H:%M')}"
        bbox = draw.textbbox((0, 0), time_text, font=self.fonts["small"])
        text_width = bbox[2] - bbox[0]
        draw.text((width - text_width - 20, y + 2), time_text, fill="black", font=self.fonts["small"])
