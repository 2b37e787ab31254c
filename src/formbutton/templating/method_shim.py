"""Method shim — turns ``[data-method][data-to]`` clicks into form submits.

Buttons only describe the request in ``data-*`` attributes. This script
uses event delegation on ``document`` so it also covers buttons swapped
in later by htmx. On click it:

- asks for confirmation when ``data-confirm`` is set,
- builds a hidden form: GET for ``get``, otherwise POST,
- adds a method override field for PUT/PATCH/DELETE,
- adds the CSRF token field from ``data-csrf_token`` (never for GET),
- submits it.

Include it once per page, e.g. in the base layout::

    {{ method_shim() }}
"""

import json

from kida.template import Markup

from formbutton.config import DEFAULT_CONFIG, ButtonConfig

_METHOD_SHIM_JS = """\
(function(){
  if(window.__formbuttonShim)return;
  window.__formbuttonShim=true;
  var METHOD_FIELD=__METHOD_FIELD__,CSRF_FIELD=__CSRF_FIELD__,CSRF_ATTR=__CSRF_ATTR__;
  function hidden(form,name,value){
    var input=document.createElement("input");
    input.type="hidden";input.name=name;input.value=value;
    form.appendChild(input);
  }
  document.addEventListener("click",function(e){
    var el=e.target.closest("[data-method][data-to]");
    if(!el||el.disabled)return;
    e.preventDefault();
    var message=el.getAttribute("data-confirm");
    if(message&&!window.confirm(message))return;
    var method=(el.getAttribute("data-method")||"post").toLowerCase();
    var form=document.createElement("form");
    form.action=el.getAttribute("data-to");
    form.method=method==="get"?"get":"post";
    form.style.display="none";
    if(method!=="get"&&method!=="post")hidden(form,METHOD_FIELD,method);
    var token=el.getAttribute(CSRF_ATTR);
    if(token&&method!=="get")hidden(form,CSRF_FIELD,token);
    var target=el.getAttribute("data-target");
    if(target)form.target=target;
    document.body.appendChild(form);
    form.submit();
  },false);
})();
"""


def method_shim_js(config: ButtonConfig = DEFAULT_CONFIG) -> str:
    """Return the shim source with *config*'s field names filled in."""
    return (
        _METHOD_SHIM_JS.replace("__METHOD_FIELD__", json.dumps(config.method_field))
        .replace("__CSRF_FIELD__", json.dumps(config.csrf_field))
        .replace("__CSRF_ATTR__", json.dumps(f"data-{config.csrf_key}"))
    )


def method_shim_snippet(config: ButtonConfig = DEFAULT_CONFIG) -> Markup:
    """Build the ``<script>`` tag for the method shim."""
    return Markup('<script data-formbutton="method-shim">' + method_shim_js(config) + "</script>")
