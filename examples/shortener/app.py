"""URL shortener — a dict of paths layered over a YAML record list.

Requests for known paths redirect; everything else gets a plain
"Hello, world!" page.

Serve ``app`` with any ASGI server.
"""

from urlshort import Request, Response, as_asgi, map_handler, yaml_handler


def hello(request: Request) -> Response:
    return Response("Hello, world!\n")


paths_to_urls = {
    "/urlshort-godoc": "https://godoc.org/github.com/gophercises/urlshort",
    "/yaml-godoc": "https://godoc.org/gopkg.in/yaml.v2",
}
map_fallback = map_handler(paths_to_urls, hello)

yaml = b"""\
- path: /urlshort
  url: https://github.com/gophercises/urlshort
- path: /urlshort-final
  url: https://github.com/gophercises/urlshort/tree/solution
"""
handler = yaml_handler(yaml, map_fallback)

app = as_asgi(handler)
