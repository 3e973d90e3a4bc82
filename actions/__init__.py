"""Ad Copy Assistant - Actions.

Each action takes a raw input (mapping or input model) and an
``ActionContext`` and returns a result envelope, or raises ``ActionError``.

Example:
    >>> from actions import ActionContext, User, server
    >>>
    >>> context = ActionContext(store=store, user=User(id="user-1"))
    >>> result = await server["createCampaign"]({"name": "Spring Sale"}, context)
    >>> result["data"]["campaign"].name
    'Spring Sale'
"""

from .ad_copies import create_ad_copy, delete_ad_copy, list_ad_copies, update_ad_copy
from .campaigns import create_campaign, list_campaigns, update_campaign
from .errors import ActionError, ActionErrorCode
from .identity import ActionContext, User, require_user
from .performance import list_ad_performance, log_ad_performance

# Action name -> handler
server = {
    "createCampaign": create_campaign,
    "updateCampaign": update_campaign,
    "listCampaigns": list_campaigns,
    "createAdCopy": create_ad_copy,
    "updateAdCopy": update_ad_copy,
    "deleteAdCopy": delete_ad_copy,
    "listAdCopies": list_ad_copies,
    "logAdPerformance": log_ad_performance,
    "listAdPerformance": list_ad_performance,
}

__all__ = [
    "server",
    "ActionContext",
    "ActionError",
    "ActionErrorCode",
    "User",
    "require_user",
    "create_campaign",
    "update_campaign",
    "list_campaigns",
    "create_ad_copy",
    "update_ad_copy",
    "delete_ad_copy",
    "list_ad_copies",
    "log_ad_performance",
    "list_ad_performance",
]
