"""Default remote endpoints for the heating control services."""

API_GATEWAY = "https://{id}.execute-api.eu-west-2.amazonaws.com/default"

STATUS_URL = API_GATEWAY.format(id="kbrcagx0xi") + "/FrontPageAPIv2"
BOOST_URL = API_GATEWAY.format(id="3gtpvcw888") + "/BoostAppAPIv2"
PROFILE_LIST_URL = API_GATEWAY.format(id="wt999xvbu1") + "/TempProfileDisplayAPIv2"
PROFILE_SAVE_URL = API_GATEWAY.format(id="rcm4tg6vng") + "/TempProfileUpdateAPIv2"
PROFILE_DELETE_URL = API_GATEWAY.format(id="fa2tbi6j76") + "/TempProfileDeleteAPIv2"
PRIORITY_UPDATE_URL = API_GATEWAY.format(id="anp440nimj") + "/TempProfilePriorityUpdateAPIv2"

ADDRESS_BASE_URL = "https://api.getAddress.io"
