"""AWS region codes and their display names.

Used to validate ``--region`` before any client is created and to label the
output of the ``regions`` command.
"""

import re

AWS_REGIONS = {
    'us-east-1': 'US East (N. Virginia)',
    'us-east-2': 'US East (Ohio)',
    'us-west-1': 'US West (N. California)',
    'us-west-2': 'US West (Oregon)',
    'af-south-1': 'Africa (Cape Town)',
    'ap-east-1': 'Asia Pacific (Hong Kong)',
    'ap-south-1': 'Asia Pacific (Mumbai)',
    'ap-south-2': 'Asia Pacific (Hyderabad)',
    'ap-northeast-1': 'Asia Pacific (Tokyo)',
    'ap-northeast-2': 'Asia Pacific (Seoul)',
    'ap-northeast-3': 'Asia Pacific (Osaka)',
    'ap-southeast-1': 'Asia Pacific (Singapore)',
    'ap-southeast-2': 'Asia Pacific (Sydney)',
    'ap-southeast-3': 'Asia Pacific (Jakarta)',
    'ap-southeast-4': 'Asia Pacific (Melbourne)',
    'ca-central-1': 'Canada (Central)',
    'ca-west-1': 'Canada West (Calgary)',
    'eu-central-1': 'EU (Frankfurt)',
    'eu-central-2': 'EU (Zurich)',
    'eu-west-1': 'EU (Ireland)',
    'eu-west-2': 'EU (London)',
    'eu-west-3': 'EU (Paris)',
    'eu-north-1': 'EU (Stockholm)',
    'eu-south-1': 'EU (Milan)',
    'eu-south-2': 'EU (Spain)',
    'me-south-1': 'Middle East (Bahrain)',
    'me-central-1': 'Middle East (UAE)',
    'il-central-1': 'Israel (Tel Aviv)',
    'sa-east-1': 'South America (Sao Paulo)',
}

# Shape of a region code, e.g. us-gov-west-1 or eu-central-2
_REGION_PATTERN = re.compile(r"^[a-z]{2}(-[a-z]+)+-\d$")


def is_valid_region(region_code: str) -> bool:
    """Check whether a region code is known or at least well-formed.

    Regions launched after this table was written still pass as long as
    they look like a region code.
    """
    if region_code in AWS_REGIONS:
        return True
    return bool(_REGION_PATTERN.match(region_code or ""))


def get_region_name(region_code: str) -> str:
    """Get the display name for a region code, falling back to the code."""
    return AWS_REGIONS.get(region_code, region_code)
