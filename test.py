import json

from token_uri.domain.uri import decode_token_uri, encode_token_uri, strip_prefix

metadata = {
    "name": "BAYC #18",
    "description": "A SVG NFT!",
    "attributes": [{"trait_type": "Mood", "value": 25}],
}

# Encode/decode round-trip
uri = encode_token_uri(json.dumps(metadata))
text = decode_token_uri(uri)
json.loads(text)  # == metadata

# Prefix handling
strip_prefix(uri)  # payload only
decode_token_uri(strip_prefix(uri))  # same text, prefix optional

# Lenient vs strict
decode_token_uri(uri.rstrip("="))  # padding tolerated
decode_token_uri(uri, strict=True)  # same text; unpadded input would raise MalformedTokenURIError
