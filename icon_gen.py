"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

HEADER_FILL = "#DA4501"


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA tear-off calendar page showing the day of month."""
    size = 64
    header_h = 16
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)
    draw.rectangle((0, 0, size - 1, header_h), fill=HEADER_FILL)

    text = str((today or date.today()).day)
    body_h = size - header_h - 2

    # Largest font that still fits below the header strip
    font_size = 60
    font = None
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            font = ImageFont.load_default()
            break
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size - 4 and bbox[3] - bbox[1] <= body_h:
            break
        font_size -= 2

    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = header_h + (size - header_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img
