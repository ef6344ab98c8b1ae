"""QR codes that open the phone controller page for a room."""

from io import BytesIO
from urllib.parse import urlencode

import qrcode
from PIL import Image

QR_SIZE = 256
QR_BORDER = 2


def build_join_url(mobile_url: str, room_id: str) -> str:
    """Append the room code to the controller page URL, e.g. http://localhost:3000/mobile?room=A3X9K2."""
    separator = "&" if "?" in mobile_url else "?"
    return f"{mobile_url}{separator}{urlencode({'room': room_id})}"


def render_qr_png(data: str, size: int = QR_SIZE, border: int = QR_BORDER) -> bytes:
    """Encode data as a square black-on-white PNG QR code.

    Args:
        data: Text to encode, normally a join URL
        size: Width and height of the output image in pixels
        border: Quiet zone around the code, in modules

    Returns:
        PNG image bytes
    """
    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_M, border=border)
    qr.add_data(data)
    qr.make(fit=True)

    image = qr.make_image(fill_color="black", back_color="white").get_image()
    resized = image.resize((size, size), Image.Resampling.NEAREST)

    buffer = BytesIO()
    resized.save(buffer, format="PNG")
    return buffer.getvalue()
