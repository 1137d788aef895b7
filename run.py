import logging

import uvicorn

from brokenlinks.api.app import create_app
from brokenlinks.container import Container


def main(container: Container = None):
    container = container or Container()
    logging.basicConfig(
        level=container.config.LOG_LEVEL() or "INFO",
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(container)
    port = container.config.PORT() or 5000
    logging.getLogger(__name__).info("Link checker server listening on 0.0.0.0:%s", port)
    uvicorn.run(app, host="0.0.0.0", port=int(port))


if __name__ == '__main__':
    main()
