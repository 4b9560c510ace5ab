import re

WARNINGS = {
    "pass": {
        "message": "message here.",
        "conditional": lambda value: True,
    },
    "fail": {
        "message": "hello i should fail",
        "when": lambda value: False,
    },
    "regexp": {
        "message": "hello, im a regexp based conditional matching semver ranges",
        "conditional": re.compile(r"v?\d+?\.\d+?\.\d+?"),
    },
    "number": {
        "message": "hello, im a straight check number",
        "conditional": 1447,
    },
    "string": {
        "message": "conditionally check a string",
        "conditional": "yes",
    },
    "regular": {
        "message": "this message will be outputted",
    },
    "array": {
        "message": [
            "im also capable of processing array messages so we",
            "can spread these messages over multiple lines",
            "manually",
        ],
    },
}
