from datetime import datetime
import os


def get_timestamped_path(directory="captures", stem="sketch"):
    if not os.path.exists(directory):
        os.makedirs(directory)
    return os.path.join(directory, f"{stem}_{datetime.now().strftime('%Y%m%d_%H%M%S')}.png")
