import sys
import tempfile
from wsgiref.simple_server import make_server

## We'll try to use the local simpledav library, not the system-installed
sys.path.insert(0, "..")
sys.path.insert(0, ".")

import simpledav

## CONFIGURATION.  Edit here, or leave it empty and set SIMPLEDAV_URL,
## SIMPLEDAV_USERNAME and SIMPLEDAV_PASSWORD in the environment.
dav_url = "https://dav.example.com/remote.php/webdav/"
username = "somebody"
password = "hunter2"


def run_examples():
    """
    Run through all the examples, one by one
    """
    ## Initiating the client object will not cause any server communication,
    ## so the credentials aren't validated.
    ## The client object can be used as a context manager, like this:
    with simpledav.DAVClient(url=dav_url, username=username, password=password) as client:
        list_dir_demo(client, "/")

        ## Let's create a collection to play with.  Only 201 Created
        ## counts as success, so this returns False if it already exists.
        if not client.mkdir("/simpledav-examples/"):
            print("could not create /simpledav-examples/, maybe it exists already")

        upload_download_demo(client)

        ## Cleanup
        client.delete("/simpledav-examples/")


def list_dir_demo(client, path):
    """
    Entries come in the order the server delivered them, the entry
    for the directory itself is left out.
    """
    for entry in client.list_dir(path):
        print(f"{entry.kind:9} {entry.size:>10} {entry.mtime:>10} {entry.name}")


def upload_download_demo(client):
    with tempfile.NamedTemporaryFile(suffix=".txt") as local:
        local.write(b"Hello from simpledav\n")
        local.flush()
        assert client.upload(local.name, "/simpledav-examples/hello world.txt")

    info = client.get_resource_info("/simpledav-examples/hello world.txt")
    print(f"uploaded {info.name}, {info.size} bytes")
    assert not client.is_directory("/simpledav-examples/hello world.txt")

    with tempfile.NamedTemporaryFile() as local:
        assert client.download("/simpledav-examples/hello world.txt", local.name)
        print(open(local.name, "rb").read())


def relay_server_demo(client, port=8000):
    """
    Serves the files on the WebDAV server over plain http, i.e.
    http://localhost:8000/videos/holiday.mp4 .  Range requests from
    the browser are passed on, so seeking in videos works.
    """

    def app(environ, start_response):
        response = client.download_to_response(
            environ.get("PATH_INFO", "/"), range_header=environ.get("HTTP_RANGE")
        )
        return response(environ, start_response)

    with make_server("", port, app) as httpd:
        httpd.serve_forever()


if __name__ == "__main__":
    if not dav_url:
        client = simpledav.get_davclient()
        list_dir_demo(client, "/")
    else:
        run_examples()
