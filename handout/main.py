import logging

import uvicorn
from handout.api.api_run import app
from handout.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from handout.utilities.network import describe_urls


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    urls = describe_urls(APP_HOST, APP_PORT)
    # Point to the URL you can open in a browser
    print(f"Medication handout builder running on {urls[0]} (Press CTRL+C to quit)")
    # LAN-accessible URL for other devices on the same network
    for url in urls[1:]:
        print(f"Accessible from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
