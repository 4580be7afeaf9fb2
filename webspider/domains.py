"""Public suffix lookups over a built-in subset of the public suffix list."""

from __future__ import annotations

_RULES = frozenset(
    """
    co.uk org.uk ac.uk gov.uk me.uk ltd.uk plc.uk net.uk sch.uk nhs.uk
    com.au net.au org.au edu.au gov.au asn.au id.au
    co.nz org.nz net.nz ac.nz govt.nz
    co.jp ne.jp or.jp ac.jp go.jp ad.jp ed.jp gr.jp lg.jp
    co.in net.in org.in gov.in ac.in firm.in gen.in ind.in res.in edu.in
    com.br net.br org.br gov.br edu.br
    com.cn net.cn org.cn gov.cn edu.cn ac.cn
    com.mx org.mx gob.mx com.ar gob.ar com.tr org.tr gov.tr
    co.za org.za gov.za ac.za com.sg edu.sg gov.sg com.hk org.hk edu.hk
    co.kr or.kr ac.kr go.kr com.tw org.tw edu.tw co.il org.il ac.il
    com.my com.ph com.vn co.id or.id ac.id com.pk com.ng com.eg com.sa
    co.th in.th ac.th go.th com.ua co.at or.at ac.at
    github.io gitlab.io herokuapp.com appspot.com blogspot.com
    cloudfront.net azurewebsites.net netlify.app vercel.app pages.dev
    workers.dev s3.amazonaws.com firebaseapp.com web.app
    *.ck *.bd *.er *.fk *.jm *.kh *.mm *.np *.pg
    """.split()
)

_EXCEPTIONS = frozenset({"www.ck"})


def public_suffix(domain: str) -> str:
    """Return the public suffix of ``domain``.

    Unknown top-level domains fall back to their last label.
    """
    labels = domain.split(".")
    lowered = [label.lower() for label in labels]
    for start in range(len(labels)):
        candidate = ".".join(lowered[start:])
        if candidate in _EXCEPTIONS:
            return ".".join(labels[start + 1:])
        if candidate in _RULES:
            return ".".join(labels[start:])
        parent = ".".join(lowered[start + 1:])
        if parent and "*." + parent in _RULES:
            return ".".join(labels[start:])
    return labels[-1]


def _check_labels(domain: str) -> None:
    if domain.startswith(".") or domain.endswith(".") or ".." in domain:
        raise ValueError(f"publicsuffix: empty label in domain {domain!r}")


def effective_tld_plus_one(domain: str) -> str:
    """Return the registrable domain (public suffix plus one label)."""
    _check_labels(domain)
    suffix = public_suffix(domain)
    if len(domain) <= len(suffix):
        raise ValueError(f"publicsuffix: cannot derive eTLD+1 for domain {domain!r}")
    cut = len(domain) - len(suffix) - 1
    if domain[cut] != ".":
        raise ValueError(f"publicsuffix: invalid public suffix {suffix!r} for domain {domain!r}")
    return domain[domain.rfind(".", 0, cut) + 1:]


def domain_rdn_and_dn(domain: str) -> tuple[str, str]:
    """Return the root domain and its name without suffix.

    For ``test.example.io`` that is ``("example.io", "example")``. A domain
    that is itself a public suffix gives ``(domain, "")``.
    """
    _check_labels(domain)
    suffix = public_suffix(domain)
    if len(domain) <= len(suffix):
        return domain, ""
    cut = len(domain) - len(suffix) - 1
    if domain[cut] != ".":
        return domain, ""
    begin = domain.rfind(".", 0, cut) + 1
    return domain[begin:], domain[begin:cut]